from dataclasses import dataclass, field


@dataclass
class Command:
    name: str
    args: list[str] = field(default_factory=list)
    raw: str = ""

    def get(self, index: int, default: str | None = None) -> str | None:
        if index < 0:
            raise ValueError("Argument index cannot be negative")

        if index < len(self.args):
            return self.args[index]

        return default

    def rest(self, start: int) -> str:
        """Join the arguments from start onward with single spaces."""
        if start < 0:
            raise ValueError("Argument index cannot be negative")

        return " ".join(self.args[start:])


def parse_command(line: str) -> Command | None:
    parts = line.split()
    if not parts:
        return None

    return Command(name=parts[0].lower(), args=parts[1:], raw=line.rstrip("\r\n"))

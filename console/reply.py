from dataclasses import dataclass, field


@dataclass
class Reply:
    ok: bool = True
    lines: list[str] = field(default_factory=list)
    close: bool = False

    def text(self, *lines: str) -> 'Reply':
        return Reply(
            ok=self.ok,
            lines=self.lines + list(lines),
            close=self.close
        )

def reply(ok: bool = True, close: bool = False) -> Reply:
    return Reply(ok=ok, close=close)

import sys
import time
from typing import Callable, Dict, List, NamedTuple, Optional, TextIO
from .command import Command, parse_command
from .reply import Reply, reply
import logging

logger = logging.getLogger()

DEFAULT_PROMPT = "\nEnter command: "


class Registration(NamedTuple):
    handler: Callable[[Command], object]
    usage: str
    description: str
    min_args: int
    max_args: Optional[int]


class Shell:
    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        prompt: str = DEFAULT_PROMPT,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt
        self.commands: Dict[str, Registration] = {}

    def command(
        self,
        name: str,
        usage: str = "",
        description: str = "",
        min_args: int = 0,
        max_args: Optional[int] = None,
    ):
        """Decorator for registering command handlers"""
        def decorator(handler):
            self.commands[name.lower()] = Registration(
                handler=handler,
                usage=usage or name,
                description=description,
                min_args=min_args,
                max_args=max_args,
            )
            return handler
        return decorator

    def banner(self) -> List[str]:
        lines = [
            "Welcome to the AVL tree console!",
            "Available commands:",
        ]
        width = max((len(r.usage) for r in self.commands.values()), default=0)
        for registration in self.commands.values():
            lines.append(f"  {registration.usage.ljust(width)}  - {registration.description}")
        return lines

    def handle_command(self, command: Command) -> Reply:
        """Route command to appropriate handler"""
        registration = self.commands.get(command.name)

        if registration is None:
            return reply(ok=False).text(
                f"Unknown command: {command.name}. "
                "Please use one of the available commands."
            )

        argc = len(command.args)
        if argc < registration.min_args:
            return reply(ok=False).text(
                f"Not enough arguments for command {command.name}. "
                f"Usage: {registration.usage}"
            )
        if registration.max_args is not None and argc > registration.max_args:
            return reply(ok=False).text(
                f"Too many arguments for command {command.name}. "
                f"Usage: {registration.usage}"
            )

        try:
            result = registration.handler(command)

            if isinstance(result, Reply):
                return result
            elif result is None:
                return reply()
            elif isinstance(result, str):
                return reply().text(result)
            elif isinstance(result, list):
                return reply().text(*result)

            raise TypeError("Handler result cannot be converted to a console reply")
        except Exception as e:
            logger.error(f"Handler error: {e}")
            return reply(ok=False).text(f"Internal error: {e}")

    def write_reply(self, result: Reply) -> None:
        for line in result.lines:
            self.stdout.write(line + "\n")
        self.stdout.flush()

    def run(self):
        """Run the read-dispatch-write loop until exit, EOF or interrupt"""
        logger.info("Console session started")
        self.write_reply(reply().text(*self.banner()))

        try:
            while True:
                self.stdout.write(self.prompt)
                self.stdout.flush()

                try:
                    line = self.stdin.readline()
                except UnicodeDecodeError as e:
                    self.write_reply(reply(ok=False).text(f"Error reading input: {e}"))
                    continue

                # EOF
                if line == "":
                    break

                command = parse_command(line)
                if command is None:
                    self.write_reply(reply(ok=False).text(
                        "Empty command. Please enter a command."
                    ))
                    continue

                start_time = time.perf_counter()
                logger.debug(f"--> {command.name}")

                result = self.handle_command(command)
                self.write_reply(result)

                elapsed_ms = (time.perf_counter() - start_time) * 1000
                logger.debug(
                    f"<-- {'ok' if result.ok else 'error'} - {len(result.lines)} lines - {elapsed_ms:.2f}ms"
                )

                if result.close:
                    break
        except KeyboardInterrupt:
            logger.info("Console shutdown requested")
        finally:
            logger.info("Console session closed")

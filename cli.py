import logging
import os

from avl_index import AVLTree
from console.command import Command
from console.reply import Reply, reply
from console.shell import DEFAULT_PROMPT, Shell

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

INVALID_KEY = "Invalid key. The key must be an integer."


def parse_key(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def main():
    shell = Shell(prompt=os.environ.get("AVL_PROMPT", DEFAULT_PROMPT))
    tree = AVLTree()
    register_commands(shell, tree)
    logger.debug(f"Registered commands: {list(shell.commands)}")
    shell.run()

def register_commands(shell: Shell, tree: AVLTree):

    @shell.command('insert', 'insert <key> <value>', 'Insert an element', min_args=2)
    def insert(command: Command) -> Reply:
        key = parse_key(command.get(0))
        if key is None:
            return reply(ok=False).text(INVALID_KEY)

        tree.insert(key, command.rest(1))
        return reply().text(f"Element with key {key} inserted/updated.")

    @shell.command('remove', 'remove <key>', 'Remove an element', min_args=1, max_args=1)
    def remove(command: Command) -> Reply:
        key = parse_key(command.get(0))
        if key is None:
            return reply(ok=False).text(INVALID_KEY)

        if tree.remove(key):
            return reply().text(f"Element with key {key} removed.")
        return reply().text(f"Element with key {key} not found.")

    @shell.command('find', 'find <key>', 'Find the value for a key', min_args=1, max_args=1)
    def find(command: Command) -> Reply:
        key = parse_key(command.get(0))
        if key is None:
            return reply(ok=False).text(INVALID_KEY)

        if not tree.has(key):
            return reply().text(f"Element with key {key} not found.")
        return reply().text(f"Value for key {key}: {tree.find(key)}")

    @shell.command('display', 'display', 'Show all elements in ascending key order', max_args=0)
    def display(command: Command) -> Reply:
        lines = ["AVL tree elements (in ascending key order):"]
        tree.inorder_traversal(lambda k, v: lines.append(f"  Key: {k}, Value: {v}"))
        return reply().text(*lines)

    @shell.command('exit', 'exit', 'Quit the program', max_args=0)
    def exit_(command: Command) -> Reply:
        return reply(close=True).text("Goodbye, come back soon!")


def run():
    try:
        main()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()

"""
Line-oriented command console for driving an ordered index interactively.
"""

from console.command import Command, parse_command
from console.reply import Reply, reply
from console.shell import Shell

__all__ = ["Command", "parse_command", "Reply", "reply", "Shell"]

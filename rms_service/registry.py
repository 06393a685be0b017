"""
CommandRegistry - Explicit command registration pattern

Bounded Context: Command registration and validation
Responsibilities:
  - Register user commands with handlers
  - Validate command existence before execution
  - Provide introspection (available_commands, get_help)

Threading: Thread-safe (uses lock for write operations)
"""

from typing import Callable, Dict, List, Optional, Set
import threading


class CommandNotAvailableError(Exception):
    """Raised when attempting to execute an unregistered command"""
    pass


class CommandRegistry:
    """
    Registry for user commands with explicit registration.

    Handlers receive the list of command arguments and may return a value
    for the caller to display.

    Example:
        registry = CommandRegistry()
        registry.register('pick', lambda args: service.give_me_one(), "Pick a zone")

        try:
            zone = registry.execute('pick')
        except CommandNotAvailableError as e:
            print(f"Command not available: {e}")
    """

    def __init__(self):
        self._commands: Dict[str, Callable] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, command: str, handler: Callable, description: str) -> None:
        """
        Register a command with its handler function.

        Raises:
            ValueError: If command already registered or name is invalid
        """
        if not command or any(ch.isspace() for ch in command):
            raise ValueError(f"Invalid command name: {command!r}")

        with self._lock:
            if command in self._commands:
                raise ValueError(f"Command '{command}' already registered")

            self._commands[command] = handler
            self._descriptions[command] = description

    def execute(self, command: str, args: Optional[List[str]] = None):
        """
        Execute a registered command.

        Args:
            command: Command name to execute
            args: Command arguments (default: none)

        Returns:
            Whatever the handler returns

        Raises:
            CommandNotAvailableError: If command not registered
        """
        handler = self._commands.get(command)
        if handler is None:
            raise CommandNotAvailableError(
                f"Command '{command}' not available. "
                f"Available commands: {', '.join(sorted(self.available_commands))}"
            )

        return handler(list(args or []))

    def is_available(self, command: str) -> bool:
        return command in self._commands

    @property
    def available_commands(self) -> Set[str]:
        return set(self._commands.keys())

    def get_help(self) -> Dict[str, str]:
        """Snapshot of {command: description}."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._commands)

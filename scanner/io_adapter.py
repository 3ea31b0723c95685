# scanner/io_adapter.py

from abc import ABC, abstractmethod

class IOAdapter(ABC):
    @abstractmethod
    def prompt(self, message: str) -> None:
        """Show a full line (error messages, notices)."""
        ...

    @abstractmethod
    def ask(self, question: str) -> None:
        """Show a question, leaving the cursor on the same line."""
        ...

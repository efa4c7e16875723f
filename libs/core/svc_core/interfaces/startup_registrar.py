from collections.abc import Sequence
from typing import Protocol


class StartupRegistrar(Protocol):
    def register(
        self,
        name: str,
        program: str,
        arguments: Sequence[str],
        working_directory: str,
    ) -> None:
        ...

    def unregister(self, name: str) -> None:
        ...

    def is_registered(self, name: str) -> bool:
        ...

from dataclasses import dataclass

# Longest title kept; stays well below the csv module's default field size limit.
MAX_TITLE_LENGTH = 4096


@dataclass
class Todo:
    id: int
    title: str
    is_completed: bool = False

    def toggle(self) -> None:
        self.is_completed = not self.is_completed

    def as_tuple(self) -> tuple[int, str, bool]:
        return (self.id, self.title, self.is_completed)

from dataclasses import dataclass


@dataclass(frozen=True)
class Cycle:
    """
    One countdown run: a task and how many minutes it should last.
    Fields never change after creation.
    """
    id: str
    task: str
    minutes_amount: int

    @property
    def total_seconds(self):
        return self.minutes_amount * 60

    def to_dict(self):
        return {
            "id": self.id,
            "task": self.task,
            "minutes_amount": self.minutes_amount,
        }

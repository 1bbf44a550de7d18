from dataclasses import dataclass

from Infrastructure.variables import MIN_TASK_LENGTH, MIN_CYCLE_MINUTES, MAX_CYCLE_MINUTES


class CycleValidationError(ValueError):
    """Base class for rejected new-cycle input. Carries the offending form field."""
    field = None
    default_message = "Invalid cycle"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TaskTooShort(CycleValidationError):
    field = "task"
    default_message = "Enter a task"


class MinutesNotANumber(CycleValidationError):
    field = "minutes_amount"
    default_message = "The cycle length must be a whole number of minutes"


class MinutesTooLow(CycleValidationError):
    field = "minutes_amount"
    default_message = f"The cycle must be at least {MIN_CYCLE_MINUTES} min"


class MinutesTooHigh(CycleValidationError):
    field = "minutes_amount"
    default_message = f"The cycle must be at most {MAX_CYCLE_MINUTES} min"


@dataclass(frozen=True)
class ValidatedInput:
    task: str
    minutes_amount: int


def _coerce_minutes(minutes_amount):
    # bool is an int subclass but never a valid duration
    if isinstance(minutes_amount, bool):
        raise MinutesNotANumber()
    if isinstance(minutes_amount, int):
        return minutes_amount
    if isinstance(minutes_amount, float):
        if minutes_amount != minutes_amount or not minutes_amount.is_integer():
            raise MinutesNotANumber()
        return int(minutes_amount)
    if isinstance(minutes_amount, str):
        try:
            return int(minutes_amount.strip())
        except ValueError:
            raise MinutesNotANumber() from None
    raise MinutesNotANumber()


def collect_issues(task, minutes_amount):
    """
    Returns every rule the input breaks, task rule first.
    An empty list means validate() will accept the input.
    """
    issues = []
    if task is None or len(task) < MIN_TASK_LENGTH:
        issues.append(TaskTooShort())

    try:
        minutes = _coerce_minutes(minutes_amount)
    except MinutesNotANumber as e:
        issues.append(e)
        return issues

    if minutes < MIN_CYCLE_MINUTES:
        issues.append(MinutesTooLow())
    elif minutes > MAX_CYCLE_MINUTES:
        issues.append(MinutesTooHigh())
    return issues


def validate(task, minutes_amount):
    """
    Checks a candidate task and duration before a cycle may be created.
    Raises the first CycleValidationError found; otherwise returns the
    input with the minutes coerced to int.
    """
    issues = collect_issues(task, minutes_amount)
    if issues:
        raise issues[0]
    return ValidatedInput(task=task, minutes_amount=_coerce_minutes(minutes_amount))

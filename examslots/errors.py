class ExamSlotsError(Exception):
    """Base class for errors raised by examslots."""


class EmptyInputError(ExamSlotsError, ValueError):
    """No usable students or courses survived normalization.

    ``side`` is ``"students"`` or ``"courses"``.
    """

    def __init__(self, side: str, message: str):
        super().__init__(message)
        self.side = side


class ScheduleIntegrityError(ExamSlotsError, AssertionError):
    """The coloring engine produced an invalid slot assignment.

    This is a defect in the engine, not a problem with the input.
    """

    def __init__(self, message: str, slot=None, pair=None):
        super().__init__(message)
        self.slot = slot
        self.pair = pair

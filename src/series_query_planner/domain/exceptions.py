from datetime import datetime


class PlanningError(Exception):
    pass


class InvalidTimeRangeError(PlanningError):
    def __init__(
        self,
        message: str = "Invalid time range",
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class PlanAssemblyError(PlanningError):
    pass

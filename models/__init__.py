from models.subject import Subject
from models.calendar import Calendar, CalendarResponse, ScheduleDay
from models.form_state import FormState, ViewState

__all__ = [
    "Subject",
    "ScheduleDay",
    "Calendar",
    "CalendarResponse",
    "FormState",
    "ViewState",
]

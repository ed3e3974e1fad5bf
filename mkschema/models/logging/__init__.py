from .log_models import Event as Event
from .log_models import FieldEvent as FieldEvent

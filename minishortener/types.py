from collections.abc import Callable
from datetime import date
from typing import TypeAlias


# Type aliases for pluggable collaborators
RecordId: TypeAlias = int
ShortcodeFactory: TypeAlias = Callable[[], str]
URLValidator: TypeAlias = Callable[[str], bool]
DateSource: TypeAlias = Callable[[], date]
LivenessCheck: TypeAlias = Callable[[RecordId], bool]

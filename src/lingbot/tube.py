"""Interface of the streaming transport ("tube").

The tube carries partial and final content to its consumers, applies content
filters and accepts out-of-band records such as errors. Its queueing, filtering
and cancellation live outside this package; bots and adapters only use the
methods below and never cancel the transport themselves.
"""

import re
from typing import Any, Callable, Protocol, TypedDict, Union

Filter = Union[str, re.Pattern, Callable[[Any], bool]]


class TubeRecord(TypedDict):
    event: str
    data: Any


class Tube(Protocol):
    def add_filter(self, filter: Filter) -> None: ...

    def clear_filters(self) -> None: ...

    def enqueue(self, record: TubeRecord) -> None: ...

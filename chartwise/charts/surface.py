"""
Host rendering surface contract and chart lifecycle capabilities.

A chart component binds the transformation engine to a host-provided
plotting surface. The surface is an external collaborator; these protocols
describe only what the chart calls on it.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class RenderSurface(Protocol):
    """The plotting surface a chart renders into (an ECharts instance or similar)."""

    def set_option(self, options: Mapping[str, Any], not_merge: bool = False) -> None: ...

    def clear(self) -> None: ...

    def resize(self, hints: Any = None, context: Any = None) -> None: ...

    def dispose(self) -> None: ...

    def on(self, event_name: str, callback: Callable[..., Any]) -> None: ...


# (container handle, theme name) -> surface
SurfaceFactory = Callable[[Any, str], RenderSurface]


@runtime_checkable
class Mountable(Protocol):
    def mount(self, container: Any, context: "MountContext | None") -> None: ...


@runtime_checkable
class Updatable(Protocol):
    def update(self, props: Any) -> Any: ...


@runtime_checkable
class Resizable(Protocol):
    def resize(self, hints: Any = None, context: Any = None) -> None: ...


@runtime_checkable
class Disposable(Protocol):
    def unmount(self) -> None: ...


class ChartEvent(BaseModel):
    """An interaction event forwarded verbatim to the surface at mount time."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(..., description="Surface event name, e.g. 'click'")
    callback: Callable[..., Any]


class MountContext(BaseModel):
    """Host context supplied on mount."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    surface_factory: SurfaceFactory | None = None
    theme: str = "default"

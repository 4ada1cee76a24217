"""
Scatter chart component: binds the scatter transformation to a host surface.

Lifecycle::

    UNMOUNTED --mount--> MOUNTED --update/resize*--> MOUNTED --unmount--> DISPOSED

Every update recomputes the whole render spec and replaces the surface
options wholesale. Once disposed, the component ignores every further call.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from chartwise.charts.scatter_component.options import build_scatter_options
from chartwise.charts.shared.channels import is_match_requirement
from chartwise.charts.shared.projection import RowPayloadExtractor, extract_row_payload
from chartwise.charts.surface import ChartEvent, MountContext, RenderSurface
from chartwise.configs.logging_init import logger
from chartwise.models.chart_config import ChartConfig, ChartRequirement
from chartwise.models.dataset import ChartDataset
from chartwise.models.types import ChannelKind

SCATTER_REQUIREMENTS = (
    ChartRequirement(bounds={ChannelKind.GROUP: (0, 999), ChannelKind.AGGREGATE: (1, 2)}),
)


class ChartState(str, Enum):
    UNMOUNTED = "unmounted"
    MOUNTED = "mounted"
    DISPOSED = "disposed"


class ChartUpdateProps(BaseModel):
    """Inputs of one update; both are required for anything to render."""

    model_config = ConfigDict(extra="ignore")

    dataset: ChartDataset | None = None
    config: ChartConfig | None = None


class ScatterChart:
    """Scatter chart implementing the Mountable/Updatable/Resizable/Disposable capabilities."""

    chart_type = "scatter"
    requirements = SCATTER_REQUIREMENTS

    def __init__(
        self,
        mouse_events: list[ChartEvent] | None = None,
        extractor: RowPayloadExtractor = extract_row_payload,
    ):
        self.mouse_events = mouse_events or []
        self.extractor = extractor
        self.surface: RenderSurface | None = None
        self.state = ChartState.UNMOUNTED

    @property
    def disposed(self) -> bool:
        return self.state == ChartState.DISPOSED

    def mount(self, container: Any, context: MountContext | None) -> None:
        """Create the surface in ``container`` and register interaction events.

        Mounting without a container or surface factory is a no-op, which
        tolerates re-entry while the host re-renders. Mounting again rebinds
        the chart: the previous surface is disposed first.
        """
        if self.disposed:
            logger.debug("Scatter chart already disposed, ignoring mount")
            return
        if container is None or context is None or context.surface_factory is None:
            logger.debug("No container or surface factory, skipping mount")
            return

        if self.surface is not None:
            logger.debug("Scatter chart remounted, disposing previous surface")
            self.surface.dispose()
            self.surface = None

        self.surface = context.surface_factory(container, context.theme)
        for event in self.mouse_events:
            self.surface.on(event.name, event.callback)
        self.state = ChartState.MOUNTED
        logger.debug(f"Scatter chart mounted with {len(self.mouse_events)} event(s)")

    def update(self, props: ChartUpdateProps | dict[str, Any] | None) -> dict[str, Any] | None:
        """Render ``props`` onto the surface.

        Returns:
            The derived options (also handed to the surface when mounted), or
            None when nothing was derived (disposed, missing inputs or unmet
            requirements).
        """
        if self.disposed or props is None:
            return None
        if not isinstance(props, ChartUpdateProps):
            props = ChartUpdateProps.model_validate(props)
        if props.dataset is None or props.config is None:
            return None

        if not is_match_requirement(props.config, self.requirements):
            if self.surface is not None:
                self.surface.clear()
            return None

        options = build_scatter_options(props.dataset, props.config, self.extractor).to_options()
        if self.surface is not None:
            self.surface.set_option(options, not_merge=True)
        return options

    def resize(self, hints: Any = None, context: Any = None) -> None:
        if self.surface is not None and not self.disposed:
            self.surface.resize(hints, context)

    def unmount(self) -> None:
        if self.disposed:
            return
        if self.surface is not None:
            self.surface.dispose()
        self.surface = None
        self.state = ChartState.DISPOSED
        logger.debug("Scatter chart disposed")

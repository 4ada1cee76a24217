"""
Channel classification and the chart requirement gate.

Field bindings arrive as editor sections tagged with a channel type. These
helpers flatten them into one ordered binding list per ``ChannelKind`` and
check whether the bound counts satisfy a chart kind's requirements.
"""

from collections.abc import Sequence

from chartwise.configs.logging_init import logger
from chartwise.models.chart_config import ChartConfig, ChartRequirement, DataSection, FieldBinding
from chartwise.models.types import ChannelKind

ChannelBindings = dict[ChannelKind, list[FieldBinding]]


def classify_bindings(datas: Sequence[DataSection]) -> ChannelBindings:
    """Flatten sections into bindings per channel, keeping declaration order.

    Every ``ChannelKind`` is present in the result; sections of other types
    (filters, ...) are ignored.
    """
    channels: ChannelBindings = {kind: [] for kind in ChannelKind}
    for section in datas:
        kind = section.channel
        if kind is None:
            continue
        channels[kind].extend(section.rows)
    return channels


def get_channel_bindings(datas: Sequence[DataSection], kind: ChannelKind) -> list[FieldBinding]:
    return classify_bindings(datas)[kind]


def is_match_requirement(config: ChartConfig, requirements: Sequence[ChartRequirement]) -> bool:
    """Return True when the config satisfies at least one requirement.

    A chart kind without requirements accepts any config. A mismatch is the
    normal state of a half-edited chart, so it is only logged at debug level.
    """
    if not requirements:
        return True

    channels = classify_bindings(config.datas)
    counts = {kind: len(bindings) for kind, bindings in channels.items()}
    matched = any(requirement.is_satisfied_by(counts) for requirement in requirements)
    if not matched:
        logger.debug(
            "Chart requirements not met: "
            + ", ".join(f"{kind.value}={count}" for kind, count in counts.items())
        )
    return matched

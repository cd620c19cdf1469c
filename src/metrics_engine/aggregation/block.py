"""Block Aggregator — one exercise block's distance, duration and series."""

from __future__ import annotations

import logging

from metrics_engine.aggregation.strategies import strategy_for
from metrics_engine.models.aggregates import ZERO_AGGREGATE, BlockAggregate
from metrics_engine.models.enums import InputMode
from metrics_engine.models.plan import ExerciseBlock
from metrics_engine.registry import ActivityRegistry, classify

logger = logging.getLogger(__name__)


def aggregate_block(
    block: ExerciseBlock,
    registry: ActivityRegistry | None = None,
) -> BlockAggregate:
    """Compute one block's contribution to the totals.

    Annotation blocks contribute nothing. Otherwise the block's explicit
    ``input_mode`` and its activity's measurement kind pick the strategy;
    the presence or absence of sets never changes the mode.

    Args:
        block: The exercise block to measure.
        registry: Activity taxonomy; the default taxonomy when omitted.

    Returns:
        A new BlockAggregate.
    """
    if block.is_annotation:
        return ZERO_AGGREGATE

    activity_class = registry.classify(block.activity) if registry else classify(block.activity)
    strategy = strategy_for(block.input_mode, activity_class.kind)
    if strategy is None:
        logger.debug(
            "Block %s has no usable input mode (%r); counted as zero",
            block.block_id, block.input_mode,
        )
        return ZERO_AGGREGATE

    if block.input_mode == InputMode.MANUAL and block.sets:
        logger.debug(
            "Manual block %s carries %d sets; sets ignored",
            block.block_id, len(block.sets),
        )
    return strategy.aggregate(block)

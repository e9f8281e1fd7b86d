"""Reporting functions for printing detection results."""

from collections import Counter

from sketch_site.detection import DetectionResult
from sketch_site.detection.auto_layout import describe_layout, process_layout
from sketch_site.detection.config import LayoutConfig
from sketch_site.detection.layout_descriptor import (
    describe_components,
    describe_property_instructions,
)


def print_summary(
    results: list[DetectionResult],
    *,
    detailed: bool = False,
) -> None:
    """Print a human-readable summary of detection results to stdout.

    Args:
        results: One DetectionResult per processed request
        detailed: If True, include the rejection reason counts
    """
    total_components = 0
    grouped = 0
    single = 0
    rejected = 0
    by_type: Counter[str] = Counter()
    reasons: Counter[str] = Counter()

    for result in results:
        total_components += len(result.components)
        rejected += len(result.rejected)
        for component in result.components:
            by_type[str(component.type)] += 1
            if component.is_group_member:
                grouped += 1
            else:
                single += 1
        reasons.update(reason.value for reason in result.rejected.values())

    print("=== Detection summary ===")
    print(f"    Canvases processed: {len(results)}")
    print(f"    Total components: {total_components}")
    print(f"    Grouped components: {grouped}")
    print(f"    Single components: {single}")
    print(f"    Filtered rectangles: {rejected}")
    if by_type:
        parts = [f"{k}={v}" for k, v in sorted(by_type.items())]
        print("    Components by type: " + ", ".join(parts))

    if detailed and reasons:
        parts = [f"{k}={v}" for k, v in sorted(reasons.items())]
        print("    Rejection reasons: " + ", ".join(parts))


def print_description(result: DetectionResult) -> None:
    """Print a one line description of every component."""
    print("=== Layout description ===")
    if not result.components:
        print("    (no components)")
        return
    print(describe_components(result.components, result.canvas))

    instructions = describe_property_instructions(result.components)
    if instructions:
        print("=== Property instructions ===")
        print(instructions)


def print_layout(result: DetectionResult, config: LayoutConfig | None = None) -> None:
    """Print the components arranged into layout sections."""
    print("=== Layout sections ===")
    groups = process_layout(result.components, result.canvas, config)
    if not groups:
        print("    (no components)")
        return
    print(describe_layout(groups))

"""Human-readable descriptions of detected components."""

from __future__ import annotations

from collections.abc import Sequence

from sketch_site.detection.detected_component import DetectedComponent
from sketch_site.detection.geometry import CanvasSize, position_description
from sketch_site.detection.properties import (
    ComponentProperties,
    TextAlignment,
    TextStyle,
)


def describe_properties(properties: ComponentProperties) -> str:
    """Summarise properties as ``Boolean[...]; Colors[...]`` style sections.

    Returns an empty string when there are no properties.
    """
    sections: list[str] = []

    if properties.boolean_properties:
        body = ", ".join(
            f"{p.name}: {'enabled' if p.current_value else 'disabled'}"
            for p in properties.boolean_properties
        )
        sections.append(f"Boolean[{body}]")

    if properties.instance_swap_properties:
        body = ", ".join(
            f"{p.name}: {p.current_option}" for p in properties.instance_swap_properties
        )
        sections.append(f"InstanceSwap[{body}]")

    if properties.text_properties:
        body = ", ".join(
            f'{p.name}: "{p.content}" '
            f"(style: {p.style.display_name}, align: {p.alignment.display_name})"
            for p in properties.text_properties
        )
        sections.append(f"Text[{body}]")

    if properties.color_properties:
        body = ", ".join(
            f"{p.name}: {p.current_color} ({p.semantic_role.display_name})"
            for p in properties.color_properties
        )
        sections.append(f"Colors[{body}]")

    if properties.navigation_items_properties:
        parts = []
        for p in properties.navigation_items_properties:
            all_items = ", ".join(item.text for item in p.items)
            active = ", ".join(item.text for item in p.items if item.is_active)
            parts.append(f"{p.name}: [{all_items}] (active: {active})")
        sections.append(f"Navigation[{', '.join(parts)}]")

    return "; ".join(sections)


def describe_component(
    index: int, component: DetectedComponent, canvas: CanvasSize
) -> str:
    rect = component.rect
    line = (
        f"Element {index + 1} ({component.type}): "
        f"{int(rect.width)}×{int(rect.height)} at {position_description(rect, canvas)}"
    )
    if component.label is not None:
        line += f", label: {component.label}"
    if component.text_content is not None:
        line += f', text: "{component.text_content}"'
    properties = describe_properties(component.properties)
    if properties:
        line += f", Properties: {properties}"
    return line


def describe_components(
    components: Sequence[DetectedComponent], canvas: CanvasSize
) -> str:
    """Describe each component on its own line: type, size, position, extras.

    Example line::

        Element 1 (button): 120×44 at top-left, label: btn-submit
    """
    return "\n".join(
        describe_component(i, c, canvas) for i, c in enumerate(components)
    )


# Phrases for enabled boolean properties. Unlisted names become "enable <name>".
_BOOLEAN_PHRASES: dict[str, str] = {
    "Has Icon": "include an icon",
    "Is Disabled": "make it disabled/non-interactive",
    "Loading State": "show loading spinner/state",
    "Show Logo": "include a logo",
    "Show Icon": "display an icon",
    "Dismissible": "add dismiss/close functionality",
    "Is Required": "mark as required field",
    "Has Error": "show error state",
}

# Templates for instance swap choices, formatted with the lower-cased option.
_SWAP_TEMPLATES: dict[str, str] = {
    "Button Style": "style as {} button",
    "Alert Type": "make it a {} alert",
    "Navigation Style": "use {} navigation style",
    "Orientation": "arrange in {} orientation",
}


def _swap_phrase(name: str, option: str) -> str:
    if name == "Icon Type":
        return f"use {option} icon"
    template = _SWAP_TEMPLATES.get(name)
    if template is None:
        return f"set {name.lower()} to {option}"
    return template.format(option.lower())


def property_instructions(properties: ComponentProperties) -> list[str]:
    """Turn properties into short build instructions, in property order.

    Disabled boolean properties produce nothing; every other property
    produces one phrase.
    """
    phrases = [
        _BOOLEAN_PHRASES.get(p.name, f"enable {p.name.lower()}")
        for p in properties.boolean_properties
        if p.current_value
    ]
    phrases.extend(
        _swap_phrase(p.name, p.current_option)
        for p in properties.instance_swap_properties
    )

    for p in properties.text_properties:
        phrase = f'text content: "{p.content}"'
        if p.style != TextStyle.REGULAR:
            phrase += f" with {p.style.display_name.lower()} style"
        if p.alignment != TextAlignment.LEFT:
            phrase += f" aligned {p.alignment.display_name.lower()}"
        phrases.append(phrase)

    phrases.extend(
        f"{p.name.lower()}: {p.current_color} ({p.semantic_role.display_name} role)"
        for p in properties.color_properties
    )

    for p in properties.navigation_items_properties:
        items = []
        for item in p.items:
            text = item.text
            if item.is_active:
                text += " (active)"
            if item.icon is not None:
                text += f" with {item.icon} icon"
            items.append(text)
        phrases.append(f"navigation items: {', '.join(items)}")

    return phrases


def describe_property_instructions(components: Sequence[DetectedComponent]) -> str:
    """One ``Element N: ...`` line per component that has any instructions.

    Numbering follows the position in ``components``, so it lines up with
    ``describe_components``. Returns an empty string when nothing applies.
    """
    lines = []
    for index, component in enumerate(components):
        phrases = property_instructions(component.properties)
        if phrases:
            lines.append(f"Element {index + 1}: {', '.join(phrases)}")
    return "\n".join(lines)

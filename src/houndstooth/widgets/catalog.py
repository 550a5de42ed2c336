"""
Widget catalog - specification factories for the built-in components.

Every factory returns a ComponentSpec and accepts the same options:

- ``name``: name of the compiled component. Defaults to the factory name.
- ``base_class``: class of the root element. Derived from the name if unset.
- ``modifiers``: list of ModifierSpec replacing the default modifiers.
- ``class_name_fn``: maps a modifier value to a class name (default: identity).
- ``extra``: compile-time options merged over the widget's own (for example
  ``{"disabled_class": "is-inactive"}`` for ``button_link``).

Usage::

    units = register_catalog(badge={"class_name_fn": modifier_class_name})
    units["badge"](size="large", inner_block="8")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from jinja2 import Environment
from pydantic import BaseModel, ConfigDict, Field

from houndstooth.compiler.compiler import RenderUnit, compile_component
from houndstooth.compiler.registry import ComponentRegistry, default_registry
from houndstooth.specs.attributes import AttributeSpec, AttributeType, SlotSpec
from houndstooth.specs.component import ComponentSpec, ComponentType, identity
from houndstooth.specs.modifier import ModifierSpec
from houndstooth.widgets.state import ExpansionMode, ensure_label, mark_current_item

logger = logging.getLogger(__name__)

SINCE = "0.6.0"

_OPTIONS = frozenset({"name", "base_class", "modifiers", "class_name_fn", "extra"})


def modifier_class_name(value: str) -> str:
    """Class name function prefixing modifier values with ``is-``."""
    return f"is-{value}"


# =============================================================================
# Shared declarations
# =============================================================================

_COLORS = ["primary", "secondary", "info", "success", "warning", "danger"]

SIZE = ModifierSpec(name="size", values=["small", "normal", "medium", "large"], default="normal")
VARIANT = ModifierSpec(name="variant", values=_COLORS, default="primary")
OPTIONAL_VARIANT = ModifierSpec(name="variant", values=[None, *_COLORS], default=None)
FILL = ModifierSpec(name="fill", values=["solid", "outline", "text"], default="solid")
SHAPE = ModifierSpec(name="shape", values=[None, "circle", "pill"], default=None)

BUTTON_MODIFIERS = [VARIANT, SIZE, FILL, SHAPE]

REST = AttributeSpec(name="rest", type=AttributeType.GLOBAL, doc="Any additional HTML attributes.")
INNER_BLOCK = SlotSpec(name="inner_block", required=True)


def _build(
    factory: str,
    options: dict[str, Any],
    *,
    template: str | None = None,
    modifiers: list[ModifierSpec] | None = None,
    base_class: str | None = None,
    extra: dict[str, Any] | None = None,
    **fields: Any,
) -> ComponentSpec:
    unknown = set(options) - _OPTIONS
    if unknown:
        raise TypeError(f"{factory}() got unexpected option(s): {', '.join(sorted(unknown))}")
    return ComponentSpec(
        name=options.get("name", factory),
        base_class=options.get("base_class", base_class),
        modifiers=options.get("modifiers", modifiers or []),
        class_name_fn=options.get("class_name_fn", identity),
        extra={**(extra or {}), **options.get("extra", {})},
        template=template or f"components/{factory}.html",
        since=SINCE,
        **fields,
    )


def _conditional_class(flag: str, option: str) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Keep the class configured under ``option`` only when ``flag`` is set."""

    def prepare(context: dict[str, Any]) -> dict[str, Any]:
        return {**context, option: context[option] if context.get(flag) else None}

    return prepare


def _labelled(component: str, example: str) -> Callable[[dict[str, Any]], dict[str, Any]]:
    def prepare(context: dict[str, Any]) -> dict[str, Any]:
        ensure_label(context, component, example)
        return context

    return prepare


def _current_breadcrumb(context: dict[str, Any]) -> dict[str, Any]:
    return {**context, "item": mark_current_item(context["item"])}


# =============================================================================
# Components
# =============================================================================


def accordion(**options: Any) -> ComponentSpec:
    return _build(
        "accordion",
        options,
        doc="Renders a set of headings that control the visibility of their content sections.",
        usage=(
            'accordion(id="dog-breeds", section=[\n'
            '    {"title": "Golden Retriever", "inner_block": "Friendly, intelligent."},\n'
            '    {"title": "Siberian Husky", "inner_block": "Energetic, outgoing."},\n'
            "])"
        ),
        attributes=[
            AttributeSpec(name="id", required=True),
            AttributeSpec(
                name="expanded",
                type=AttributeType.ATOM,
                values=[mode.value for mode in ExpansionMode],
                default=ExpansionMode.ALL.value,
                doc=(
                    "Defines how the accordion sections are initialized: `all` expands "
                    "every section, `none` hides every section, `first` expands only "
                    "the first one."
                ),
            ),
            AttributeSpec(
                name="heading",
                values=["h2", "h3", "h4", "h5", "h6"],
                default="h3",
                doc="The heading level for the section title (trigger).",
            ),
            REST,
        ],
        slots=[SlotSpec(name="section", required=True, attrs=[AttributeSpec(name="title")])],
    )


def action_bar(**options: Any) -> ComponentSpec:
    return _build(
        "action_bar",
        options,
        doc=(
            "The action bar offers users quick access to primary actions within the "
            "application. It is typically positioned to float above other content."
        ),
        attributes=[REST],
        slots=[
            SlotSpec(
                name="item",
                required=True,
                attrs=[
                    AttributeSpec(name="label", required=True),
                    AttributeSpec(name="on_click", type=AttributeType.COMMANDS, required=True),
                ],
            )
        ],
    )


def badge(**options: Any) -> ComponentSpec:
    return _build(
        "badge",
        options,
        modifiers=[SIZE, OPTIONAL_VARIANT],
        doc="Renders a badge, typically used for drawing attention to elements like notification counts.",
        attributes=[REST],
        slots=[INNER_BLOCK],
    )


def box(**options: Any) -> ComponentSpec:
    return _build(
        "box",
        options,
        doc="Renders a box for a section on the page.",
        attributes=[REST],
        slots=[
            SlotSpec(name="title", doc="The title for the box."),
            SlotSpec(name="inner_block", required=True, doc="Slot for the content of the box body."),
            SlotSpec(name="action", doc="A slot for action buttons related to the box."),
            SlotSpec(name="banner", doc="A slot that can be used to render a banner image in the header."),
            SlotSpec(name="footer", doc="An optional slot for the footer."),
        ],
    )


def breadcrumb(**options: Any) -> ComponentSpec:
    return _build(
        "breadcrumb",
        options,
        type=ComponentType.NAVIGATION,
        doc="Renders a breadcrumb navigation. The last item is marked as the current page.",
        usage=(
            "breadcrumb(item=[\n"
            '    {"patch": "/categories", "inner_block": "Categories"},\n'
            '    {"patch": "/categories/1", "inner_block": "Reviews"},\n'
            "])"
        ),
        attributes=[
            AttributeSpec(
                name="label",
                default="Breadcrumb",
                doc=(
                    "The aria label for the `<nav>` element. It should be localized and "
                    "should not repeat the word 'navigation'."
                ),
            ),
            REST,
        ],
        slots=[
            SlotSpec(
                name="item",
                required=True,
                attrs=[
                    AttributeSpec(name="navigate"),
                    AttributeSpec(name="patch"),
                    AttributeSpec(name="href"),
                ],
            )
        ],
        prepare=_current_breadcrumb,
    )


def button(**options: Any) -> ComponentSpec:
    return _build(
        "button",
        options,
        modifiers=BUTTON_MODIFIERS,
        type=ComponentType.BUTTON,
        doc=(
            "Renders a button. Use it for actions that don't navigate to a different "
            "page. To style a link like a button, use `button_link` instead. To "
            "indicate a loading state, set the `aria-busy` attribute."
        ),
        attributes=[
            AttributeSpec(name="type", values=["button", "reset", "submit"], default="button"),
            AttributeSpec(name="disabled", type=AttributeType.BOOLEAN, default=None),
            REST,
        ],
        slots=[INNER_BLOCK],
    )


def button_link(**options: Any) -> ComponentSpec:
    return _build(
        "button_link",
        options,
        base_class="button",
        modifiers=BUTTON_MODIFIERS,
        extra={"disabled_class": "is-disabled"},
        type=ComponentType.BUTTON,
        doc=(
            "Renders a link (`<a>`) that has the role and style of a button. To "
            "perform an action on the same page, use a real button instead."
        ),
        attributes=[
            AttributeSpec(
                name="disabled",
                type=AttributeType.BOOLEAN,
                default=False,
                doc="Since `<a>` tags cannot have a `disabled` attribute, this attribute toggles a class.",
            ),
            AttributeSpec(name="navigate"),
            AttributeSpec(name="patch"),
            AttributeSpec(name="href"),
            REST,
        ],
        slots=[INNER_BLOCK],
        prepare=_conditional_class("disabled", "disabled_class"),
    )


def cluster(**options: Any) -> ComponentSpec:
    return _build(
        "cluster",
        options,
        doc="Visually groups children. Common use cases are groups of buttons or tags.",
        attributes=[REST],
        slots=[INNER_BLOCK],
    )


def disclosure_button(**options: Any) -> ComponentSpec:
    return _build(
        "disclosure_button",
        options,
        base_class="button",
        modifiers=BUTTON_MODIFIERS,
        type=ComponentType.BUTTON,
        doc=(
            "Renders a button that toggles the visibility of another element.\n\n"
            "The initial state is collapsed. The caller must render the controlled "
            "element with the `hidden` attribute and keep its visibility in line "
            "with the button's `aria-expanded` attribute."
        ),
        attributes=[
            AttributeSpec(
                name="controls",
                required=True,
                doc="The DOM ID of the element that this button controls.",
            ),
            REST,
        ],
        slots=[INNER_BLOCK],
    )


def fab(**options: Any) -> ComponentSpec:
    return _build(
        "fab",
        options,
        modifiers=[VARIANT, SIZE, SHAPE.model_copy(update={"default": "circle"})],
        type=ComponentType.BUTTON,
        doc="Renders a floating action button.",
        attributes=[
            AttributeSpec(name="label", required=True),
            AttributeSpec(name="disabled", type=AttributeType.BOOLEAN, default=False),
            REST,
        ],
        slots=[INNER_BLOCK],
    )


def skeleton(**options: Any) -> ComponentSpec:
    return _build(
        "skeleton",
        options,
        modifiers=[
            ModifierSpec(
                name="type",
                values=["text-line", "text-block", "image", "circle", "rectangle", "square"],
                required=True,
            )
        ],
        doc=(
            "Renders a skeleton loader, a placeholder for content that is in the "
            "process of loading. Apply `aria-busy=\"true\"` to the container of "
            "the skeleton layout."
        ),
        attributes=[REST],
    )


def stack(**options: Any) -> ComponentSpec:
    return _build(
        "stack",
        options,
        extra={"recursive_class": "is-recursive"},
        doc="Applies a vertical margin between the child elements.",
        attributes=[
            AttributeSpec(
                name="recursive",
                type=AttributeType.BOOLEAN,
                default=False,
                doc="If true, the stack margins will be applied to nested elements as well.",
            ),
            REST,
        ],
        slots=[INNER_BLOCK],
        prepare=_conditional_class("recursive", "recursive_class"),
    )


def tag(**options: Any) -> ComponentSpec:
    return _build(
        "tag",
        options,
        modifiers=[
            SIZE,
            OPTIONAL_VARIANT,
            ModifierSpec(name="shape", values=[None, "pill"], default=None),
        ],
        doc="Renders a tag, typically used for displaying labels, categories, or keywords.",
        attributes=[REST],
        slots=[INNER_BLOCK],
    )


def toggle_button(**options: Any) -> ComponentSpec:
    return _build(
        "toggle_button",
        options,
        base_class="button",
        modifiers=BUTTON_MODIFIERS,
        type=ComponentType.BUTTON,
        doc=(
            "Renders a button that toggles a state, for example dark mode or "
            "mute/unmute. The state is conveyed via `aria-pressed`; the button text "
            "should not change with the state."
        ),
        usage='toggle_button(on_click=CommandSequence(), pressed=muted, inner_block="Mute")',
        attributes=[
            AttributeSpec(name="pressed", type=AttributeType.BOOLEAN, default=False),
            AttributeSpec(
                name="on_click",
                type=AttributeType.COMMANDS,
                required=True,
                doc="Commands to run when the button is clicked. The `aria-pressed` toggle is appended.",
            ),
            AttributeSpec(name="disabled", type=AttributeType.BOOLEAN, default=None),
            REST,
        ],
        slots=[INNER_BLOCK],
    )


def toolbar(**options: Any) -> ComponentSpec:
    return _build(
        "toolbar",
        options,
        doc=(
            "Renders a container for a set of controls. Either `label` or "
            "`labelledby` must be set."
        ),
        attributes=[
            AttributeSpec(name="label", doc="Accessibility label, set as `aria-label`."),
            AttributeSpec(name="labelledby", doc="The DOM ID of an element that labels this toolbar."),
            AttributeSpec(name="controls", doc="DOM ID of the element controlled by this toolbar."),
            REST,
        ],
        slots=[INNER_BLOCK],
        prepare=_labelled("toolbar", "Dog profile actions"),
    )


def tooltip(**options: Any) -> ComponentSpec:
    return _build(
        "tooltip",
        options,
        base_class="tooltip-container",
        doc=(
            "Renders content with a tooltip. The tooltip `<div>` has the `tooltip` "
            "role and is hidden unless the element is hovered on or focused."
        ),
        attributes=[
            AttributeSpec(name="id", required=True),
            AttributeSpec(
                name="contains_link",
                type=AttributeType.BOOLEAN,
                default=False,
                doc=(
                    "If false, the element wrapping the inner block gets `tabindex=\"0\"` "
                    "so the tooltip can be shown by focusing it. Set to true if the inner "
                    "block already contains a focusable element."
                ),
            ),
            REST,
        ],
        slots=[INNER_BLOCK, SlotSpec(name="tooltip", required=True)],
    )


def tree(**options: Any) -> ComponentSpec:
    return _build(
        "tree",
        options,
        doc=(
            "Renders a hierarchical list as a tree, for example a folder structure. "
            "Either `label` or `labelledby` must be set."
        ),
        attributes=[
            AttributeSpec(name="label", doc="Accessibility label, set as `aria-label`."),
            AttributeSpec(name="labelledby", doc="The DOM ID of an element that labels this tree."),
            REST,
        ],
        slots=[
            SlotSpec(
                name="inner_block",
                required=True,
                doc="The root nodes of the tree, rendered with `tree_item`.",
            )
        ],
        prepare=_labelled("tree", "Dog Breeds"),
    )


def tree_item(**options: Any) -> ComponentSpec:
    return _build(
        "tree_item",
        options,
        doc="Renders a tree item within a `tree`, or within the `items` slot of another tree item.",
        attributes=[REST],
        slots=[
            SlotSpec(name="items", doc="Children of this item. Omit for leaf nodes."),
            SlotSpec(name="inner_block", required=True, doc="The item label."),
        ],
    )


CATALOG: tuple[Callable[..., ComponentSpec], ...] = (
    accordion,
    action_bar,
    badge,
    box,
    breadcrumb,
    button,
    button_link,
    cluster,
    disclosure_button,
    fab,
    skeleton,
    stack,
    tag,
    toggle_button,
    toolbar,
    tooltip,
    tree,
    tree_item,
)


def build_catalog(**overrides: dict[str, Any]) -> list[ComponentSpec]:
    """Build every catalog specification.

    Args:
        **overrides: Options per factory, keyed by factory name.
    """
    unknown = set(overrides) - {factory.__name__ for factory in CATALOG}
    if unknown:
        raise TypeError(f"Unknown catalog component(s): {', '.join(sorted(unknown))}")
    return [factory(**overrides.get(factory.__name__, {})) for factory in CATALOG]


class CatalogEntry(BaseModel):
    """Documentation summary of one catalog component."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Component name")
    type: ComponentType = Field(description="Catalog category")
    modifiers: list[str] = Field(default_factory=list, description="Modifier names")
    doc: str | None = Field(default=None, description="Component documentation")
    usage: str | None = Field(default=None, description="Usage example")
    since: str | None = Field(default=None, description="Version introduced")


def list_catalog(
    component_type: ComponentType | str | None = None, **overrides: dict[str, Any]
) -> list[CatalogEntry]:
    """
    List catalog components for documentation.

    Args:
        component_type: Only list components of this category.
        **overrides: Options per factory, keyed by factory name.

    Returns:
        Entries in catalog order.
    """
    wanted = ComponentType(component_type) if component_type is not None else None
    return [
        CatalogEntry(
            name=spec.name,
            type=spec.type,
            modifiers=spec.modifier_names,
            doc=spec.doc,
            usage=spec.usage,
            since=spec.since,
        )
        for spec in build_catalog(**overrides)
        if wanted is None or spec.type == wanted
    ]


def register_catalog(
    registry: ComponentRegistry | None = None,
    *,
    env: Environment | None = None,
    freeze: bool = False,
    **overrides: dict[str, Any],
) -> dict[str, RenderUnit]:
    """Compile and register every catalog component.

    Args:
        registry: Target registry. Defaults to the process-wide registry.
        env: Jinja2 environment for rendering (default: shared environment).
        freeze: Freeze the registry afterwards.
        **overrides: Options per factory, keyed by factory name.

    Returns:
        Render units keyed by component name.
    """
    registry = registry if registry is not None else default_registry
    units = {
        spec.name: compile_component(spec, registry, env=env)
        for spec in build_catalog(**overrides)
    }
    logger.debug("Registered %d catalog component(s)", len(units))
    if freeze:
        registry.freeze()
    return units

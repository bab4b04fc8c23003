"""
Client Code
===========
Works with families and creators only through their abstract interfaces,
so any variant can be passed in without changing this module. Logging the
results is done here, not in the products.
"""

from typing import Any, List, Optional

from ..core.logger import StructuredLogger, get_logger
from ..domain.creators import Creator
from ..domain.interfaces.products import GenericKind, GuiKind
from ..infrastructure.registry.family import ProductFamily


def _logger(logger: Optional[StructuredLogger]) -> StructuredLogger:
    return logger or get_logger(__name__)


def run_gui_client(family: ProductFamily, logger: Optional[StructuredLogger] = None) -> List[str]:
    """Render a button and a checkbox from one GUI family."""
    button = family.create(GuiKind.BUTTON)
    checkbox = family.create(GuiKind.CHECKBOX)

    results = [button.render(), checkbox.render(), checkbox.render_with(button)]

    _logger(logger).info("client.gui_rendered", {
        "variant": family.variant.value,
        "results": results,
    })
    return results


def run_generic_client(family: ProductFamily, logger: Optional[StructuredLogger] = None) -> List[str]:
    """Use product B alone, then let it collaborate with product A."""
    product_a = family.create(GenericKind.PRODUCT_A)
    product_b = family.create(GenericKind.PRODUCT_B)

    results = [product_b.useful_function_b(), product_b.collaborate(product_a)]

    _logger(logger).info("client.generic_completed", {
        "variant": family.variant.value,
        "results": results,
    })
    return results


def run_creator_client(creator: Creator, *args, logger: Optional[StructuredLogger] = None, **kwargs) -> Any:
    """Run a creator's task without knowing its concrete class."""
    result = creator.perform_task(*args, **kwargs)

    _logger(logger).info("client.creator_task_completed", {
        "creator": type(creator).__name__,
        "result": str(result),
    })
    return result

from __future__ import annotations

from invstatus.domain.enums import Severity, StockStatus
from invstatus.domain.models import MaterialHealth, Product, RawMaterial

_OVERRIDE_STATUSES = {StockStatus.INACTIVE.value, StockStatus.DISCONTINUED.value}


def resolve_stock_status(product: Product) -> StockStatus:
    """Derive a product's stock status from its stock level.

    An explicit ``inactive`` or ``discontinued`` status always wins over the
    stock numbers. Otherwise zero stock is out of stock and anything strictly
    below ``min_stock_level`` is low stock.
    """
    if product.status in _OVERRIDE_STATUSES:
        return StockStatus(product.status)

    stock = product.current_stock
    if stock == 0:
        return StockStatus.OUT_OF_STOCK
    if stock < product.min_stock_level:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def resolve_material_health(material: RawMaterial) -> MaterialHealth:
    """Classify a raw material's stock level into a severity band.

    Checks run in order and the first match wins:

      current_stock == 0                            -> critical
      current_stock <  min_threshold                -> warning
      reorder_point <= current_stock < max_capacity -> ok
      current_stock >= max_capacity                 -> info
      otherwise                                     -> neutral
    """
    stock = material.current_stock

    if stock == 0:
        return MaterialHealth(Severity.CRITICAL, "Out of stock — immediate action required", "alert-triangle")
    if stock < material.min_threshold:
        return MaterialHealth(Severity.WARNING, "Low stock — reorder soon", "alert-triangle")
    if material.reorder_point <= stock < material.max_capacity:
        return MaterialHealth(Severity.OK, "Stock level is healthy", "check-circle")
    if stock >= material.max_capacity:
        return MaterialHealth(Severity.INFO, "Overstock — above maximum capacity", "info")
    # between min_threshold and reorder_point
    return MaterialHealth(Severity.NEUTRAL, "Stock level is normal", "info")


def format_stock_rolls(quantity: float) -> str:
    qty = int(quantity) if float(quantity).is_integer() else quantity
    return f"{qty} {'roll' if qty == 1 else 'rolls'}"

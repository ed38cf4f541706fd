from .base import NonBlankStr, UtcDatetime, WarehouseRecord
from .client import Client, ClientTier
from .inventory import Inventory, InventoryStatus
from .location import Location, LocationType
from .order import Order, OrderLine, OrderPriority, OrderStatus, ShippingMethod
from .product import Dimensions, Product, ProductCategory
from .shipment import Shipment, ShipmentStatus

__all__ = [
    "WarehouseRecord",
    "NonBlankStr",
    "UtcDatetime",
    "Client",
    "ClientTier",
    "Inventory",
    "InventoryStatus",
    "Location",
    "LocationType",
    "Order",
    "OrderLine",
    "OrderPriority",
    "OrderStatus",
    "ShippingMethod",
    "Product",
    "ProductCategory",
    "Dimensions",
    "Shipment",
    "ShipmentStatus",
]

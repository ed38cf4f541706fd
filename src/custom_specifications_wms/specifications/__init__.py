"""Warehouse business rules, one module per record type."""

from . import client, inventory, order, product, shipment
from .client import (
    ContractExpiringSpecification,
    HasExpiredContractSpecification,
    HasLongTermContractSpecification,
    IsActiveSpecification,
    IsPremiumOrEnterpriseSpecification,
    IsTierSpecification,
)
from .common import (
    BelongsToClientSpecification,
    ClockedSpecification,
    HasStatusSpecification,
)
from .inventory import (
    CanReleaseFromQuarantineSpecification,
    IsAtLocationSpecification,
    IsAvailableSpecification,
    IsBelowReorderPointSpecification,
    IsInQuarantineSpecification,
    IsNearCapacitySpecification,
    IsOutOfStockSpecification,
    NeedsCycleCountSpecification,
    RequiresImmediateAttentionSpecification,
)
from .order import (
    HasPartialPicksSpecification,
    HasPrioritySpecification,
    HasShippingMethodSpecification,
    IsCompletelyPickedSpecification,
    IsDueSoonSpecification,
    IsInternationalSpecification,
    IsLargeOrderSpecification,
    IsOverdueSpecification,
    IsPlacedTodaySpecification,
    IsReadyToShipSpecification,
    IsUrgentSpecification,
    RequiresExpeditedProcessingSpecification,
)
from .product import (
    ExceedsWeightSpecification,
    IsCategorySpecification,
    IsExpiredSpecification,
    IsExpiringSpecification,
    IsFragileSpecification,
    IsHazmatSpecification,
    IsHighValueSpecification,
    IsOversizedSpecification,
    IsPerishableSpecification,
    RequiresRefrigerationSpecification,
    RequiresSpecialHandlingSpecification,
)
from .shipment import (
    HasDeliveryIssuesSpecification,
    HasLongDeliveryTimeSpecification,
    IsCarrierSpecification,
    IsDelayedSpecification,
    IsDeliveredSpecification,
    IsHeavyShipmentSpecification,
    IsInTransitSpecification,
    IsReturnedSpecification,
    IsShippedInDateRangeSpecification,
    IsShippedTodaySpecification,
)

__all__ = [
    "client",
    "inventory",
    "order",
    "product",
    "shipment",
    # Shared
    "ClockedSpecification",
    "BelongsToClientSpecification",
    "HasStatusSpecification",
    # Client
    "IsActiveSpecification",
    "IsTierSpecification",
    "HasExpiredContractSpecification",
    "ContractExpiringSpecification",
    "IsPremiumOrEnterpriseSpecification",
    "HasLongTermContractSpecification",
    # Inventory
    "IsBelowReorderPointSpecification",
    "IsOutOfStockSpecification",
    "IsNearCapacitySpecification",
    "IsInQuarantineSpecification",
    "CanReleaseFromQuarantineSpecification",
    "NeedsCycleCountSpecification",
    "IsAvailableSpecification",
    "IsAtLocationSpecification",
    "RequiresImmediateAttentionSpecification",
    # Order
    "HasPrioritySpecification",
    "IsUrgentSpecification",
    "IsOverdueSpecification",
    "IsDueSoonSpecification",
    "IsInternationalSpecification",
    "HasShippingMethodSpecification",
    "IsReadyToShipSpecification",
    "IsCompletelyPickedSpecification",
    "HasPartialPicksSpecification",
    "IsLargeOrderSpecification",
    "RequiresExpeditedProcessingSpecification",
    "IsPlacedTodaySpecification",
    # Product
    "IsHazmatSpecification",
    "IsFragileSpecification",
    "RequiresRefrigerationSpecification",
    "IsPerishableSpecification",
    "IsExpiredSpecification",
    "IsExpiringSpecification",
    "IsCategorySpecification",
    "ExceedsWeightSpecification",
    "IsHighValueSpecification",
    "RequiresSpecialHandlingSpecification",
    "IsOversizedSpecification",
    # Shipment
    "IsCarrierSpecification",
    "IsDelayedSpecification",
    "IsInTransitSpecification",
    "IsDeliveredSpecification",
    "IsShippedInDateRangeSpecification",
    "HasLongDeliveryTimeSpecification",
    "IsHeavyShipmentSpecification",
    "IsReturnedSpecification",
    "IsShippedTodaySpecification",
    "HasDeliveryIssuesSpecification",
]

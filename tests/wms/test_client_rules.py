"""Tests for the client rules."""

from __future__ import annotations

from datetime import timedelta

import pytest

from custom_specifications import ValidationError
from custom_specifications_wms.models import ClientTier
from custom_specifications_wms.specifications import (
    ContractExpiringSpecification,
    HasExpiredContractSpecification,
    HasLongTermContractSpecification,
    IsActiveSpecification,
    IsPremiumOrEnterpriseSpecification,
    IsTierSpecification,
)


def test_is_active(make_client):
    assert IsActiveSpecification().is_satisfied_by(make_client()) is True
    inactive = make_client(is_active=False)
    assert IsActiveSpecification().is_satisfied_by(inactive) is False


def test_is_tier(make_client):
    spec = IsTierSpecification(ClientTier.PREMIUM)
    assert spec.is_satisfied_by(make_client(tier=ClientTier.PREMIUM)) is True
    assert spec.is_satisfied_by(make_client(tier=ClientTier.ENTERPRISE)) is False
    assert spec.to_dict() == {"op": "is_tier", "tier": "premium"}


def test_tier_is_required():
    with pytest.raises(ValidationError) as exc_info:
        IsTierSpecification(None)
    assert exc_info.value.path == "tier"


@pytest.mark.parametrize(
    ("tier", "expected"),
    [
        (ClientTier.STANDARD, False),
        (ClientTier.PREMIUM, True),
        (ClientTier.ENTERPRISE, True),
    ],
)
def test_is_premium_or_enterprise(make_client, tier, expected):
    spec = IsPremiumOrEnterpriseSpecification()
    assert spec.is_satisfied_by(make_client(tier=tier)) is expected


class TestContractExpiry:
    def test_expired(self, make_client, clock, now):
        spec = HasExpiredContractSpecification(clock=clock)
        ended = make_client(contract_end_date=now - timedelta(minutes=1))
        assert spec.is_satisfied_by(ended) is True
        assert spec.is_satisfied_by(make_client()) is False
        assert spec.is_satisfied_by(make_client(contract_end_date=None)) is False

    @pytest.mark.parametrize(
        ("remaining", "expected"),
        [
            (timedelta(hours=1), True),
            (timedelta(days=30), True),
            (timedelta(days=30, hours=23), True),
            (timedelta(days=31), False),
            (timedelta(days=200), False),
        ],
    )
    def test_expiring_window(self, make_client, clock, now, remaining, expected):
        spec = ContractExpiringSpecification(30, clock=clock)
        client = make_client(contract_end_date=now + remaining)
        assert spec.is_satisfied_by(client) is expected

    def test_expiring_ignores_long_expired(self, make_client, clock, now):
        spec = ContractExpiringSpecification(30, clock=clock)
        client = make_client(contract_end_date=now - timedelta(days=2))
        assert spec.is_satisfied_by(client) is False

    def test_expiring_without_end_date(self, make_client, clock):
        spec = ContractExpiringSpecification(clock=clock)
        assert spec.is_satisfied_by(make_client(contract_end_date=None)) is False

    def test_negative_days_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ContractExpiringSpecification(-1)
        assert exc_info.value.path == "days"


class TestLongTermContract:
    def test_year_or_more(self, make_client, now):
        spec = HasLongTermContractSpecification()
        yearly = make_client(
            contract_start_date=now, contract_end_date=now + timedelta(days=365)
        )
        assert spec.is_satisfied_by(yearly) is True

    def test_shorter_than_a_year(self, make_client, now):
        spec = HasLongTermContractSpecification()
        short = make_client(
            contract_start_date=now, contract_end_date=now + timedelta(days=364)
        )
        assert spec.is_satisfied_by(short) is False

    def test_open_ended(self, make_client):
        spec = HasLongTermContractSpecification()
        assert spec.is_satisfied_by(make_client(contract_end_date=None)) is False

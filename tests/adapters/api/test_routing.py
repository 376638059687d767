# tests/adapters/api/test_routing.py

"""Tests for verdict routing"""

# Local imports
from pet_identity_validator import RoutingAction
from pet_identity_validator import route_verdict
from pet_identity_validator import validate
from pet_identity_validator.core.domain import ExtractedAttributes


class TestRouteVerdict:
    """Test route_verdict"""

    def test_valid_is_filed(self, maximus, today, default_config):
        verdict = validate(
            ExtractedAttributes(microchip="123456789012345"), maximus, today, default_config
        )

        assert route_verdict(verdict) is RoutingAction.AUTO_FILE

    def test_microchip_mismatch_is_rejected(self, maximus, today, default_config):
        verdict = validate(ExtractedAttributes(microchip="1"), maximus, today, default_config)

        assert route_verdict(verdict) is RoutingAction.REJECT

    def test_soft_failures_go_to_review(self, charlie, today, default_config):
        no_info = validate(ExtractedAttributes(), charlie, today, default_config)
        mismatch = validate(ExtractedAttributes(name="Bella"), charlie, today, default_config)

        assert route_verdict(no_info) is RoutingAction.MANUAL_REVIEW
        assert route_verdict(mismatch) is RoutingAction.MANUAL_REVIEW

"""Social interaction hits."""

from __future__ import annotations

from measurement.hits.base import HitType, PayloadRecord
from measurement.models.fields import FieldProperty, ValidatedField

MAX_SOCIAL_NETWORK = 50
MAX_SOCIAL_ACTION = 50
MAX_SOCIAL_ACTION_TARGET = 2048


class Social(PayloadRecord):
    """A ``social`` hit. Network, action and target are all required."""

    hit_type = HitType.SOCIAL

    social_network = FieldProperty("_social_network")
    social_action = FieldProperty("_social_action")
    social_action_target = FieldProperty("_social_action_target")

    def _init_fields(self) -> None:
        super()._init_fields()
        self._social_network = ValidatedField(
            "SocialNetwork", "sn", MAX_SOCIAL_NETWORK, self.policy
        )
        self._social_action = ValidatedField(
            "SocialAction", "sa", MAX_SOCIAL_ACTION, self.policy
        )
        self._social_action_target = ValidatedField(
            "SocialActionTarget", "st", MAX_SOCIAL_ACTION_TARGET, self.policy
        )

    def serialize(self) -> str:
        parts = [
            self._required(self._social_network),
            self._required(self._social_action),
            self._required(self._social_action_target),
            self._hit_type_fragment(),
        ]
        return "".join(parts) + super().serialize()

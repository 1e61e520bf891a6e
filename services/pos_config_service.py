"""
POS config service - per-restaurant ordering configuration
"""
import logging
from dataclasses import replace
from typing import Dict, Any, Optional

from models.pos import (
    RestaurantPOSConfig, POSSettings, FEATURE_KEYS, SETTING_KEYS, as_flag
)

logger = logging.getLogger(__name__)


def _snake_name(name: str, keys: Dict[str, str]) -> Optional[str]:
    # Accept either the snake_case field name or its camelCase wire key
    if name in keys:
        return name
    for snake, camel in keys.items():
        if camel == name:
            return snake
    return None


class POSConfigService:
    # Holds POS configs by restaurant and applies admin updates to them

    def __init__(self, configs: Optional[Dict[str, RestaurantPOSConfig]] = None):
        self.configs: Dict[str, RestaurantPOSConfig] = dict(configs or {})

    def default_config(self, restaurant_id: str) -> RestaurantPOSConfig:
        # Ordering, takeaway and dine-in on; payment, delivery and customization off
        return RestaurantPOSConfig(restaurant_id=restaurant_id)

    def get_config(self, restaurant_id: str) -> RestaurantPOSConfig:
        if restaurant_id not in self.configs:
            self.configs[restaurant_id] = self.default_config(restaurant_id)
        return self.configs[restaurant_id]

    def get_capabilities(self, restaurant_id: str) -> Dict[str, bool]:
        config = self.get_config(restaurant_id)
        return {
            "is_enabled": config.enabled,
            "can_order": config.can_order,
            "can_pay": config.can_pay,
            "can_deliver": config.can_deliver,
            "can_takeaway": config.can_takeaway,
            "can_dine_in": config.can_dine_in
        }

    def update_config(self, restaurant_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        # Apply a partial update; features and settings are merged key by key
        try:
            config = self.get_config(restaurant_id)
            features = config.features
            settings = config.settings

            if "features" in updates:
                feature_updates = {}
                for name, value in updates["features"].items():
                    field_name = _snake_name(name, FEATURE_KEYS)
                    if field_name is None:
                        return {
                            "success": False,
                            "error": f"Unknown POS feature: {name}"
                        }
                    feature_updates[field_name] = as_flag(name, value)
                features = replace(features, **feature_updates)

            if "settings" in updates:
                merged = settings.to_dict()
                for name, value in updates["settings"].items():
                    field_name = _snake_name(name, SETTING_KEYS)
                    if field_name is None:
                        return {
                            "success": False,
                            "error": f"Unknown POS setting: {name}"
                        }
                    merged[SETTING_KEYS[field_name]] = value
                settings = POSSettings.from_dict(merged)

            data = config.to_dict()
            for key in ("enabled", "paymentMethods", "openingHours"):
                if key in updates:
                    data[key] = updates[key]

            updated = RestaurantPOSConfig.from_dict(data)
            updated.features = features
            updated.settings = settings
            self.configs[restaurant_id] = updated

            logger.info("POS config updated for restaurant %s", restaurant_id)
            return {
                "success": True,
                "config": updated.to_dict(),
                "message": "POS configuration updated."
            }

        except (AttributeError, TypeError, ValueError) as e:
            logger.warning("Rejected POS config update for %s: %s", restaurant_id, e)
            return {
                "success": False,
                "error": str(e)
            }

    def toggle_pos(self, restaurant_id: str, enabled: bool) -> Dict[str, Any]:
        return self.update_config(restaurant_id, {"enabled": enabled})

    def toggle_feature(self, restaurant_id: str, feature: str, enabled: bool) -> Dict[str, Any]:
        return self.update_config(restaurant_id, {"features": {feature: enabled}})

    def update_settings(self, restaurant_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self.update_config(restaurant_id, {"settings": updates})

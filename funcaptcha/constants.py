"""Default FunCaptcha parameters for each Roblox flow."""

from typing import Dict, Final

PUBLIC_KEY_PATTERN: Final[str] = (
    r"^[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}$"
)

PRESET_PATTERN: Final[str] = r"^[a-z][a-z0-9]*(?:_[a-z0-9]+)*$"

# GroupJoin, FollowUser and WallPost share one site key upstream.
DEFAULT_FLOW_CONFIGS: Final[Dict[str, Dict[str, str]]] = {
    "Login": {
        "public_key": "476068BF-9607-4799-B53D-966BE98E2B81",
        "preset": "roblox_login",
    },
    "Signup": {
        "public_key": "A2A14B1D-1AF3-C791-9BBC-EE33CC7A0A6F",
        "preset": "roblox_register",
    },
    "GroupJoin": {
        "public_key": "63E4117F-E727-42B4-6DAA-C8448E9B137F",
        "preset": "roblox_join",
    },
    "FollowUser": {
        "public_key": "63E4117F-E727-42B4-6DAA-C8448E9B137F",
        "preset": "roblox_follow",
    },
    "WallPost": {
        "public_key": "63E4117F-E727-42B4-6DAA-C8448E9B137F",
        "preset": "roblox_wallpost",
    },
    "GenericCaptcha": {
        "public_key": "CC30DB96-0C88-4DEB-86E5-6601927ACBB4",
        "preset": "roblox_generic",
    },
}

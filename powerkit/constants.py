"""Configuration property names and icon names shared across the package."""

XFPM_CHANNEL_CFG = "xfce4-power-manager"
PROPERTIES_PREFIX = "/xfce4-power-manager/"

ON_AC_INACTIVITY_TIMEOUT = "inactivity-on-ac"
ON_BATTERY_INACTIVITY_TIMEOUT = "inactivity-on-battery"
INACTIVITY_SLEEP_MODE_ON_AC = "inactivity-sleep-mode-on-ac"
INACTIVITY_SLEEP_MODE_ON_BATTERY = "inactivity-sleep-mode-on-battery"

CRITICAL_POWER_LEVEL = "critical-power-level"
CRITICAL_BATT_ACTION_CFG = "critical-power-action"

DPMS_ENABLED_CFG = "dpms-enabled"
ON_BATTERY_BLANK = "blank-on-battery"
ON_AC_BLANK = "blank-on-ac"
ON_AC_DPMS_SLEEP = "dpms-on-ac-sleep"
ON_AC_DPMS_OFF = "dpms-on-ac-off"
ON_BATT_DPMS_SLEEP = "dpms-on-battery-sleep"
ON_BATT_DPMS_OFF = "dpms-on-battery-off"
DPMS_SLEEP_MODE = "dpms-sleep-mode"

LOCK_SCREEN_ON_SLEEP = "lock-screen-suspend-hibernate"
GENERAL_NOTIFICATION_CFG = "general-notification"
PRESENTATION_MODE = "presentation-mode"
NETWORK_MANAGER_SLEEP = "network-manager-sleep"
SHOW_TRAY_ICON_CFG = "show-tray-icon"

POWER_SWITCH_CFG = "power-button-action"
HIBERNATE_SWITCH_CFG = "hibernate-button-action"
SLEEP_SWITCH_CFG = "sleep-button-action"
LID_SWITCH_ON_AC_CFG = "lid-action-on-ac"
LID_SWITCH_ON_BATTERY_CFG = "lid-action-on-battery"

LOGIND_HANDLE_POWER_KEY = "logind-handle-power-key"
LOGIND_HANDLE_SUSPEND_KEY = "logind-handle-suspend-key"
LOGIND_HANDLE_HIBERNATE_KEY = "logind-handle-hibernate-key"
LOGIND_HANDLE_LID_SWITCH = "logind-handle-lid-switch"

BRIGHTNESS_ON_AC = "brightness-on-ac"
BRIGHTNESS_ON_BATTERY = "brightness-on-battery"
BRIGHTNESS_LEVEL_ON_AC = "brightness-level-on-ac"
BRIGHTNESS_LEVEL_ON_BATTERY = "brightness-level-on-battery"
BRIGHTNESS_SLIDER_MIN_LEVEL = "brightness-slider-min-level"
BRIGHTNESS_SWITCH = "brightness-switch"
BRIGHTNESS_SWITCH_SAVE = "brightness-switch-restore-on-exit"
HANDLE_BRIGHTNESS_KEYS = "handle-brightness-keys"
SHOW_BRIGHTNESS_POPUP = "show-brightness-popup"

# Icon names
XFPM_AC_ADAPTER_ICON = "xfpm-ac-adapter"

XFPM_UPS_ICON = "xfpm-ups-100"
XFPM_KBD_ICON = "input-keyboard"
XFPM_MOUSE_ICON = "input-mouse"
XFPM_PHONE_ICON = "phone"
XFPM_PDA_ICON = "pda"

XFPM_PRIMARY_ICON_PREFIX = "xfpm-primary-"
XFPM_UPS_ICON_PREFIX = "xfpm-ups-"
XFPM_MOUSE_ICON_PREFIX = "input-mouse"
XFPM_KBD_ICON_PREFIX = "input-keyboard"
XFPM_PDA_ICON_PREFIX = "pda"
XFPM_PHONE_ICON_PREFIX = "phone"
XFPM_MEDIA_PLAYER_PREFIX = "multimedia-player"
XFPM_MONITOR_PREFIX = "video-display"
XFPM_COMPUTER_ICON_PREFIX = "computer"
XFPM_TABLET_ICON_PREFIX = "tablet"

XFPM_DISPLAY_BRIGHTNESS_ICON = "xfpm-brightness-lcd"
# Shown when no brightness hardware is found.
XFPM_DISPLAY_BRIGHTNESS_INVALID_ICON = "xfpm-brightness-lcd-missing"
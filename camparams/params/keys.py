"""Well-known parameter keys and values exchanged with camera drivers.

This catalog is vocabulary for callers. :class:`ParameterMap` treats every key
the same and never consults it. Keys outside :data:`CORE_GROUP` only have
meaning on hardware that enables the matching feature group; see
:mod:`camparams.params.features`.

New keys are appended here; nothing else needs to change.
"""

from __future__ import annotations

from typing import Dict, FrozenSet

# ---------------------------------------------------------------------------
# Core keys (all targets)
# ---------------------------------------------------------------------------

KEY_PREVIEW_SIZE = "preview-size"
KEY_SUPPORTED_PREVIEW_SIZES = "preview-size-values"
KEY_PREVIEW_FPS_RANGE = "preview-fps-range"
KEY_SUPPORTED_PREVIEW_FPS_RANGE = "preview-fps-range-values"
KEY_PREVIEW_FORMAT = "preview-format"
KEY_SUPPORTED_PREVIEW_FORMATS = "preview-format-values"
KEY_PREVIEW_FRAME_RATE = "preview-frame-rate"
KEY_SUPPORTED_PREVIEW_FRAME_RATES = "preview-frame-rate-values"
KEY_PICTURE_SIZE = "picture-size"
KEY_SUPPORTED_PICTURE_SIZES = "picture-size-values"
KEY_PICTURE_FORMAT = "picture-format"
KEY_SUPPORTED_PICTURE_FORMATS = "picture-format-values"
KEY_JPEG_THUMBNAIL_WIDTH = "jpeg-thumbnail-width"
KEY_JPEG_THUMBNAIL_HEIGHT = "jpeg-thumbnail-height"
KEY_SUPPORTED_JPEG_THUMBNAIL_SIZES = "jpeg-thumbnail-size-values"
KEY_JPEG_THUMBNAIL_QUALITY = "jpeg-thumbnail-quality"
KEY_JPEG_QUALITY = "jpeg-quality"
KEY_ROTATION = "rotation"
KEY_GPS_LATITUDE = "gps-latitude"
KEY_GPS_LONGITUDE = "gps-longitude"
KEY_GPS_ALTITUDE = "gps-altitude"
KEY_GPS_TIMESTAMP = "gps-timestamp"
KEY_GPS_PROCESSING_METHOD = "gps-processing-method"
KEY_WHITE_BALANCE = "whitebalance"
KEY_SUPPORTED_WHITE_BALANCE = "whitebalance-values"
KEY_EFFECT = "effect"
KEY_SUPPORTED_EFFECTS = "effect-values"
KEY_ANTIBANDING = "antibanding"
KEY_SUPPORTED_ANTIBANDING = "antibanding-values"
KEY_SCENE_MODE = "scene-mode"
KEY_SUPPORTED_SCENE_MODES = "scene-mode-values"
KEY_FLASH_MODE = "flash-mode"
KEY_SUPPORTED_FLASH_MODES = "flash-mode-values"
KEY_FOCUS_MODE = "focus-mode"
KEY_SUPPORTED_FOCUS_MODES = "focus-mode-values"
KEY_MAX_NUM_FOCUS_AREAS = "max-num-focus-areas"
KEY_FOCUS_AREAS = "focus-areas"
KEY_FOCAL_LENGTH = "focal-length"
KEY_HORIZONTAL_VIEW_ANGLE = "horizontal-view-angle"
KEY_VERTICAL_VIEW_ANGLE = "vertical-view-angle"
KEY_EXPOSURE_COMPENSATION = "exposure-compensation"
KEY_MAX_EXPOSURE_COMPENSATION = "max-exposure-compensation"
KEY_MIN_EXPOSURE_COMPENSATION = "min-exposure-compensation"
KEY_EXPOSURE_COMPENSATION_STEP = "exposure-compensation-step"
KEY_AUTO_EXPOSURE_LOCK = "auto-exposure-lock"
KEY_AUTO_EXPOSURE_LOCK_SUPPORTED = "auto-exposure-lock-supported"
KEY_AUTO_WHITEBALANCE_LOCK = "auto-whitebalance-lock"
KEY_AUTO_WHITEBALANCE_LOCK_SUPPORTED = "auto-whitebalance-lock-supported"
KEY_MAX_NUM_METERING_AREAS = "max-num-metering-areas"
KEY_METERING_AREAS = "metering-areas"
KEY_ZOOM = "zoom"
KEY_MAX_ZOOM = "max-zoom"
KEY_ZOOM_RATIOS = "zoom-ratios"
KEY_ZOOM_SUPPORTED = "zoom-supported"
KEY_SMOOTH_ZOOM_SUPPORTED = "smooth-zoom-supported"
KEY_FOCUS_DISTANCES = "focus-distances"
KEY_VIDEO_SIZE = "video-size"
KEY_SUPPORTED_VIDEO_SIZES = "video-size-values"
KEY_MAX_NUM_DETECTED_FACES_HW = "max-num-detected-faces-hw"
KEY_MAX_NUM_DETECTED_FACES_SW = "max-num-detected-faces-sw"
KEY_PREFERRED_PREVIEW_SIZE_FOR_VIDEO = "preferred-preview-size-for-video"
KEY_VIDEO_FRAME_FORMAT = "video-frame-format"
KEY_RECORDING_HINT = "recording-hint"
KEY_VIDEO_SNAPSHOT_SUPPORTED = "video-snapshot-supported"
KEY_VIDEO_STABILIZATION = "video-stabilization"
KEY_VIDEO_STABILIZATION_SUPPORTED = "video-stabilization-supported"
KEY_LIGHTFX = "light-fx"
KEY_ORIENTATION = "orientation"

# ---------------------------------------------------------------------------
# Qualcomm
# ---------------------------------------------------------------------------

KEY_SUPPORTED_HFR_SIZES = "hfr-size-values"
KEY_PREVIEW_FRAME_RATE_MODE = "preview-frame-rate-mode"
KEY_SUPPORTED_PREVIEW_FRAME_RATE_MODES = "preview-frame-rate-modes"
KEY_TOUCH_AF_AEC = "touch-af-aec"
KEY_SUPPORTED_TOUCH_AF_AEC = "touch-af-aec-values"
KEY_TOUCH_INDEX_AEC = "touch-index-aec"
KEY_TOUCH_INDEX_AF = "touch-index-af"
KEY_SCENE_DETECT = "scene-detect"
KEY_SUPPORTED_SCENE_DETECT = "scene-detect-values"
KEY_SKIN_TONE_ENHANCEMENT = "skinToneEnhancement"
KEY_SUPPORTED_SKIN_TONE_ENHANCEMENT_MODES = "skinToneEnhancement-values"
KEY_ISO_MODE = "iso"
KEY_SUPPORTED_ISO_MODES = "iso-values"
KEY_LENSSHADE = "lensshade"
KEY_SUPPORTED_LENSSHADE_MODES = "lensshade-values"
KEY_AUTO_EXPOSURE = "auto-exposure"
KEY_SUPPORTED_AUTO_EXPOSURE = "auto-exposure-values"
KEY_DENOISE = "denoise"
KEY_SUPPORTED_DENOISE = "denoise-values"
KEY_SELECTABLE_ZONE_AF = "selectable-zone-af"
KEY_SUPPORTED_SELECTABLE_ZONE_AF = "selectable-zone-af-values"
KEY_FACE_DETECTION = "face-detection"
KEY_SUPPORTED_FACE_DETECTION = "face-detection-values"
KEY_REDEYE_REDUCTION = "redeye-reduction"
KEY_SUPPORTED_REDEYE_REDUCTION = "redeye-reduction-values"
KEY_ZSL = "zsl"
KEY_SUPPORTED_ZSL_MODES = "zsl-values"
KEY_CAMERA_MODE = "camera-mode"
KEY_VIDEO_HIGH_FRAME_RATE = "video-hfr"
KEY_SUPPORTED_VIDEO_HIGH_FRAME_RATE_MODES = "video-hfr-values"
KEY_HIGH_DYNAMIC_RANGE_IMAGING = "hdr"
KEY_SUPPORTED_HDR_IMAGING_MODES = "hdr-values"
KEY_HISTOGRAM = "histogram"
KEY_SUPPORTED_HISTOGRAM_MODES = "histogram-values"
KEY_SHARPNESS = "sharpness"
KEY_MAX_SHARPNESS = "max-sharpness"
KEY_CONTRAST = "contrast"
KEY_MAX_CONTRAST = "max-contrast"
KEY_SATURATION = "saturation"
KEY_MAX_SATURATION = "max-saturation"

# Legacy Qualcomm HALs
KEY_CAPTURE_MODE = "capture-mode"
KEY_SUPPORTED_CAPTURE_MODES = "capture-mode-values"
KEY_PICTURE_COUNT = "picture-count"
KEY_MAX_BURST_PICTURE_COUNT = "max-burst-picture-count"
KEY_CONTINUOUS_AF = "continuous-af"
KEY_SUPPORTED_CONTINUOUS_AF = "continuous-af-values"
KEY_TAKING_PICTURE_ZOOM = "taking-picture-zoom"
KEY_PANORAMA_MODE = "panorama-mode"
KEY_POSTVIEW_SIZE = "postview-size"
KEY_MIN_SHARPNESS = "min-sharpness"
KEY_MIN_CONTRAST = "min-contrast"
KEY_MIN_SATURATION = "min-saturation"

# Qualcomm HALs on Sony devices
KEY_EX_SUPPORTED_METERING_MODES = "ex-metering-mode-values"
KEY_SEMC_METRY_MODE = "semc-metry-mode"

# ---------------------------------------------------------------------------
# Other vendors
# ---------------------------------------------------------------------------

KEY_ANTI_SHAKE_MODE = "anti-shake"
KEY_METERING = "metering"
KEY_WDR = "wdr"
KEY_WEATHER = "weather"
KEY_CITYID = "contextualtag-cityid"
KEY_AUTO_CONTRAST = "auto-contrast"
KEY_BEAUTY_MODE = "beauty-mode"
KEY_BLUR_MODE = "blur-mode"
KEY_VINTAGE_MODE = "vintage-mode"

KEY_OIS_MODE = "ois_mode"
KEY_OIS_SUPPORT = "ois-support"
KEY_CONTIBURST_TYPE = "contiburst-type"
KEY_GPU_EFFECT = "gpu-effect"
KEY_SINGLE_ISP_OUTPUT_ENABLED = "single-isp-output-enabled"

KEY_AUDIO_ZOOM = "audio-zoom"
KEY_AUDIO_ZOOM_SUPPORTED = "audio-zoom-supported"
KEY_BEAUTY_SHOT = "beauty-shot"
KEY_BEAUTY_SHOT_SUPPORTED = "beauty-shot-supported"
KEY_BURST_SHOT = "burst-shot"
KEY_BURST_SHOT_SUPPORTED = "burst-shot-supported"
KEY_VIDEO_WDR = "video-wdr"
KEY_VIDEO_WDR_SUPPORTED = "video-wdr-supported"

KEY_SONY_ISO = "sony-iso"
KEY_SONY_ISO_VALUES = "sony-iso-values"
KEY_SONY_METERING_MODE = "sony-metering-mode"
KEY_SONY_METERING_MODE_VALUES = "sony-metering-mode-values"
KEY_SONY_AE_MODE = "sony-ae-mode"
KEY_SONY_AE_MODE_VALUES = "sony-ae-mode-values"
KEY_SONY_FOCUS_AREA = "sony-focus-area"
KEY_SONY_FOCUS_AREA_VALUES = "sony-focus-area-values"

KEY_MANUAL_FOCUS_POSITION = "manual-focus-position"
KEY_WB_MANUAL_CCT = "wb-manual-cct"

# ---------------------------------------------------------------------------
# Enumerated values
# ---------------------------------------------------------------------------

TRUE = "true"
FALSE = "false"

PIXEL_FORMAT_YUV422SP = "yuv422sp"
PIXEL_FORMAT_YUV420SP = "yuv420sp"
PIXEL_FORMAT_YUV422I = "yuv422i-yuyv"
PIXEL_FORMAT_YUV420P = "yuv420p"
PIXEL_FORMAT_RGB565 = "rgb565"
PIXEL_FORMAT_RGBA8888 = "rgba8888"
PIXEL_FORMAT_JPEG = "jpeg"
PIXEL_FORMAT_BAYER_RGGB = "bayer-rggb"
PIXEL_FORMAT_ANDROID_OPAQUE = "android-opaque"

WHITE_BALANCE_AUTO = "auto"
WHITE_BALANCE_INCANDESCENT = "incandescent"
WHITE_BALANCE_FLUORESCENT = "fluorescent"
WHITE_BALANCE_DAYLIGHT = "daylight"
WHITE_BALANCE_CLOUDY_DAYLIGHT = "cloudy-daylight"

EFFECT_NONE = "none"
EFFECT_MONO = "mono"
EFFECT_NEGATIVE = "negative"
EFFECT_SEPIA = "sepia"

ANTIBANDING_AUTO = "auto"
ANTIBANDING_50HZ = "50hz"
ANTIBANDING_60HZ = "60hz"
ANTIBANDING_OFF = "off"

FLASH_MODE_OFF = "off"
FLASH_MODE_AUTO = "auto"
FLASH_MODE_ON = "on"
FLASH_MODE_RED_EYE = "red-eye"
FLASH_MODE_TORCH = "torch"

SCENE_MODE_AUTO = "auto"
SCENE_MODE_NIGHT = "night"
SCENE_MODE_HDR = "hdr"

FOCUS_MODE_AUTO = "auto"
FOCUS_MODE_INFINITY = "infinity"
FOCUS_MODE_MACRO = "macro"
FOCUS_MODE_FIXED = "fixed"
FOCUS_MODE_EDOF = "edof"
FOCUS_MODE_CONTINUOUS_VIDEO = "continuous-video"
FOCUS_MODE_CONTINUOUS_PICTURE = "continuous-picture"

FOCUS_DISTANCE_INFINITY = "Infinity"

PREVIEW_FRAME_RATE_AUTO_MODE = "frame-rate-auto"
PREVIEW_FRAME_RATE_FIXED_MODE = "frame-rate-fixed"

ORIENTATION_PORTRAIT = "portrait"
ORIENTATION_LANDSCAPE = "landscape"

LIGHTFX_LOWLIGHT = "low-light"
LIGHTFX_HDR = "high-dynamic-range"

# ---------------------------------------------------------------------------
# Feature groups
# ---------------------------------------------------------------------------

CORE_GROUP = "core"

KEY_GROUPS: Dict[str, FrozenSet[str]] = {
    "qcom": frozenset({
        KEY_SUPPORTED_HFR_SIZES,
        KEY_PREVIEW_FRAME_RATE_MODE,
        KEY_SUPPORTED_PREVIEW_FRAME_RATE_MODES,
        KEY_TOUCH_AF_AEC,
        KEY_SUPPORTED_TOUCH_AF_AEC,
        KEY_TOUCH_INDEX_AEC,
        KEY_TOUCH_INDEX_AF,
        KEY_SCENE_DETECT,
        KEY_SUPPORTED_SCENE_DETECT,
        KEY_SKIN_TONE_ENHANCEMENT,
        KEY_SUPPORTED_SKIN_TONE_ENHANCEMENT_MODES,
        KEY_ISO_MODE,
        KEY_SUPPORTED_ISO_MODES,
        KEY_LENSSHADE,
        KEY_SUPPORTED_LENSSHADE_MODES,
        KEY_AUTO_EXPOSURE,
        KEY_SUPPORTED_AUTO_EXPOSURE,
        KEY_DENOISE,
        KEY_SUPPORTED_DENOISE,
        KEY_SELECTABLE_ZONE_AF,
        KEY_SUPPORTED_SELECTABLE_ZONE_AF,
        KEY_FACE_DETECTION,
        KEY_SUPPORTED_FACE_DETECTION,
        KEY_REDEYE_REDUCTION,
        KEY_SUPPORTED_REDEYE_REDUCTION,
        KEY_ZSL,
        KEY_SUPPORTED_ZSL_MODES,
        KEY_CAMERA_MODE,
        KEY_VIDEO_HIGH_FRAME_RATE,
        KEY_SUPPORTED_VIDEO_HIGH_FRAME_RATE_MODES,
        KEY_HIGH_DYNAMIC_RANGE_IMAGING,
        KEY_SUPPORTED_HDR_IMAGING_MODES,
        KEY_HISTOGRAM,
        KEY_SUPPORTED_HISTOGRAM_MODES,
        KEY_SHARPNESS,
        KEY_MAX_SHARPNESS,
        KEY_CONTRAST,
        KEY_MAX_CONTRAST,
        KEY_SATURATION,
        KEY_MAX_SATURATION,
    }),
    "qcom_legacy": frozenset({
        KEY_CAPTURE_MODE,
        KEY_SUPPORTED_CAPTURE_MODES,
        KEY_PICTURE_COUNT,
        KEY_MAX_BURST_PICTURE_COUNT,
        KEY_CONTINUOUS_AF,
        KEY_SUPPORTED_CONTINUOUS_AF,
        KEY_TAKING_PICTURE_ZOOM,
        KEY_PANORAMA_MODE,
        KEY_POSTVIEW_SIZE,
        KEY_MIN_SHARPNESS,
        KEY_MIN_CONTRAST,
        KEY_MIN_SATURATION,
    }),
    "qcom_sony": frozenset({
        KEY_EX_SUPPORTED_METERING_MODES,
        KEY_SEMC_METRY_MODE,
    }),
    "samsung": frozenset({
        KEY_ANTI_SHAKE_MODE,
        KEY_METERING,
        KEY_WDR,
        KEY_WEATHER,
        KEY_CITYID,
    }),
    "samsung_legacy": frozenset({
        KEY_ANTI_SHAKE_MODE,
        KEY_AUTO_CONTRAST,
        KEY_BEAUTY_MODE,
        KEY_BLUR_MODE,
        KEY_VINTAGE_MODE,
    }),
    "htc": frozenset({
        KEY_OIS_MODE,
        KEY_OIS_SUPPORT,
        KEY_CONTIBURST_TYPE,
        KEY_CAPTURE_MODE,
        KEY_SUPPORTED_CAPTURE_MODES,
        KEY_GPU_EFFECT,
        KEY_SINGLE_ISP_OUTPUT_ENABLED,
    }),
    "lg": frozenset({
        KEY_AUDIO_ZOOM,
        KEY_AUDIO_ZOOM_SUPPORTED,
        KEY_BEAUTY_SHOT,
        KEY_BEAUTY_SHOT_SUPPORTED,
        KEY_BURST_SHOT,
        KEY_BURST_SHOT_SUPPORTED,
        KEY_VIDEO_WDR,
        KEY_VIDEO_WDR_SUPPORTED,
    }),
    "sony": frozenset({
        KEY_SONY_ISO,
        KEY_SONY_ISO_VALUES,
        KEY_SONY_METERING_MODE,
        KEY_SONY_METERING_MODE_VALUES,
        KEY_SONY_AE_MODE,
        KEY_SONY_AE_MODE_VALUES,
        KEY_SONY_FOCUS_AREA,
        KEY_SONY_FOCUS_AREA_VALUES,
    }),
    "oppo": frozenset({
        KEY_MANUAL_FOCUS_POSITION,
        KEY_WB_MANUAL_CCT,
    }),
    "iso": frozenset({
        KEY_ISO_MODE,
        KEY_SUPPORTED_ISO_MODES,
    }),
}

FEATURE_GROUPS: FrozenSet[str] = frozenset(KEY_GROUPS)


def groups_for_key(key: str) -> FrozenSet[str]:
    """Feature groups that define ``key``; empty for core and unknown keys."""
    return frozenset(group for group, keys in KEY_GROUPS.items() if key in keys)

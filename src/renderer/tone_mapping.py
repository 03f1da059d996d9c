# renderer/tone_mapping.py
import numpy as np

TONE_MAPS = ("clamp", "reinhard", "auto")

# Rec. 709 luma weights
LUMA = np.array([0.2126, 0.7152, 0.0722])


def clamp_tone_mapping(linear):
    """
    Clips a linear image to [0, 1] and quantizes it, rounding to the nearest
    byte the same way the PPM writer does.
    """
    clipped = np.clip(linear, 0.0, 1.0)
    return np.rint(clipped * 255).astype("uint8")


def reinhard_tone_mapping(linear, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Reinhard operator followed by gamma encoding. Negative channels are
    treated as black.
    """
    exposed = np.clip(linear, 0.0, None) * exposure
    compressed = exposed / (1.0 + exposed / white_point)
    encoded = compressed ** (1.0 / gamma)
    return (encoded * 255).clip(0, 255).astype("uint8")


def auto_exposure_tone_mapping(linear, gamma=2.2, target_midgray=0.18):
    """
    Picks the exposure that maps the mean luminance of the image to
    target_midgray, then applies the Reinhard operator.
    """
    mean_luminance = float((linear @ LUMA).mean()) + 1e-5
    return reinhard_tone_mapping(linear, exposure=target_midgray / mean_luminance,
                                 white_point=1.0, gamma=gamma)


def apply_tone_map(linear, name="clamp"):
    """
    Maps a linear (height, width, 3) image to uint8 with the named operator.
    """
    if name == "clamp":
        return clamp_tone_mapping(linear)
    if name == "reinhard":
        return reinhard_tone_mapping(linear)
    if name == "auto":
        return auto_exposure_tone_mapping(linear)
    raise ValueError(f"Unknown tone map {name!r}; expected one of {TONE_MAPS}")

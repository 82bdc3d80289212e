# renderer/tone_mapping.py
import numpy as np


def gamma_tone_mapping(accumulated: np.ndarray) -> np.ndarray:
    """
    Map averaged linear radiance to 8-bit sRGB-ish values with gamma 2.

    NaN samples (from degenerate paths) are treated as black.
    """
    linear = np.nan_to_num(np.asarray(accumulated, dtype=np.float64), nan=0.0)
    mapped = np.sqrt(np.clip(linear, 0.0, None))
    output = (256 * np.clip(mapped, 0.0, 0.999)).astype("uint8")
    return output


def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    linear = np.nan_to_num(np.asarray(accumulated, dtype=np.float64), nan=0.0)
    scaled = np.clip(linear, 0.0, None) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output


def tone_map(accumulated: np.ndarray, method: str = "gamma") -> np.ndarray:
    if method == "gamma":
        return gamma_tone_mapping(accumulated)
    if method == "reinhard":
        return reinhard_tone_mapping(accumulated)
    raise ValueError(f"Unknown tone mapping method: {method!r}")

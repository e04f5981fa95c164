import numpy as np

from pitchspell.constants import SEMITONES_PER_OCTAVE
from pitchspell.diatonic import diatonic_to_semitones_array, semitones_to_nearest_diatonic_array
from pitchspell.interval import quality_label
from pitchspell.pitch import Pitch


def pitch_class_vector(pitches, weights=None):
    """
    Fold pitches into a 12-bin pitch-class vector (C=0 … B=11).

    Args:
        pitches: iterable of Pitch objects.
        weights: optional per-pitch weights; each pitch counts 1.0 otherwise.
            Weights of pitches sharing a class add up.

    Returns:
        np.array: A 12-element array of float32.
    """
    v = np.zeros(SEMITONES_PER_OCTAVE, dtype=np.float32)
    pitches = list(pitches)
    if weights is None:
        weights = [1.0] * len(pitches)
    elif len(weights) != len(pitches):
        raise ValueError(f"Got {len(weights)} weights for {len(pitches)} pitches")
    for pitch, weight in zip(pitches, weights):
        v[pitch.semitones() % SEMITONES_PER_OCTAVE] += weight
    return v


def coords_to_array(items):
    """Stack the coordinates of Pitch or Interval objects into an (n, 2) int64 array."""
    coords = [tuple(item.coord()) for item in items]
    if not coords:
        return np.zeros((0, 2), dtype=np.int64)
    return np.array(coords, dtype=np.int64)


def pitches_from_semitones(semitones):
    """Spell every semitone count in an array-like, as Pitch(semitones=n) would."""
    s = np.asarray(semitones, dtype=np.int64).ravel()
    diatonics = semitones_to_nearest_diatonic_array(s)
    return [Pitch((int(d), int(n))) for d, n in zip(diatonics, s)]


def qualities_from_coords(coords):
    """
    Quality labels for an (n, 2) array of interval coordinates.

    Offsets are computed in one vectorised pass; labelling is per row.
    """
    arr = np.asarray(coords, dtype=np.int64).reshape(-1, 2)
    offsets = arr[:, 1] - diatonic_to_semitones_array(arr[:, 0])
    return [quality_label(int(d), int(o)) for d, o in zip(arr[:, 0], offsets)]

"""
Test that the public package structure is importable.
"""

import dogm_eval
import dogm_eval.evaluation


def test_top_level_exports():
    for name in dogm_eval.__all__:
        assert hasattr(dogm_eval, name), name


def test_evaluation_exports():
    assert hasattr(dogm_eval.evaluation, 'PrecisionEvaluator')
    assert hasattr(dogm_eval.evaluation, 'compute_cluster_centroid')
    assert hasattr(dogm_eval.evaluation, 'find_closest_vehicle')
    assert hasattr(dogm_eval.evaluation, 'SessionState')

import numpy as np
import pandas as pd
import pytest

from tesystems.models import RosslerLorenzUnidir
from tesystems.search import AcceptanceCriteria
from tesystems.testdata import (
    RL_VARIABLES,
    get_ground_truth_network,
    make_rossler_lorenz_dataframe,
)


def test_ground_truth_network_structure():
    gt = get_ground_truth_network()

    assert isinstance(gt, pd.DataFrame)
    assert list(gt.index) == RL_VARIABLES
    assert list(gt.columns) == RL_VARIABLES
    assert gt.values.sum() == 10
    assert np.all(np.diag(gt.values) == 0)


def test_ground_truth_single_cross_edge():
    """Rössler drives Lorenz through x2 -> y2 only; nothing flows back."""
    gt = get_ground_truth_network()
    x_vars = ['x1', 'x2', 'x3']
    y_vars = ['y1', 'y2', 'y3']

    assert gt.loc[x_vars, y_vars].values.sum() == 1
    assert gt.loc['x2', 'y2'] == 1
    assert gt.loc[y_vars, x_vars].values.sum() == 0


def test_dataframe_from_model():
    model = RosslerLorenzUnidir(ui=[0.1] * 6, dt=0.01, c_xy=0.5,
                                observational_noise_level=0)
    df = make_rossler_lorenz_dataframe(model, npts=200, sample_dt=2, Ttr=100)

    assert df.shape == (200, 7)
    assert list(df.columns) == ['time'] + RL_VARIABLES
    assert df['time'].iloc[0] == pytest.approx(1.0)
    assert np.allclose(np.diff(df['time']), 0.02)
    assert np.allclose(df[RL_VARIABLES].values,
                       model.trajectory(200, sample_dt=2, Ttr=100))


def test_dataframe_with_random_model_is_reproducible():
    df1 = make_rossler_lorenz_dataframe(npts=300, Ttr=200, rng=3, n_maxtries=20)
    df2 = make_rossler_lorenz_dataframe(npts=300, Ttr=200, rng=3, n_maxtries=20)

    assert df1.shape == (300, 7)
    assert np.all(np.isfinite(df1[RL_VARIABLES].values))
    pd.testing.assert_frame_equal(df1, df2)


def test_dataframe_raises_when_no_model_found():
    with pytest.raises(ValueError, match="No well-behaved model"):
        make_rossler_lorenz_dataframe(npts=50, Ttr=10, rng=0, n_maxtries=0,
                                      criteria=AcceptanceCriteria(max_abs=1e-6))

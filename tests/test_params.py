import dataclasses

import pytest

from dilithcore.params import (
    DEFAULT_MODE,
    Q,
    ParameterSet,
    parameter_set,
)


def test_default_mode_is_dilithium2():
    assert parameter_set().name == "Dilithium2"
    assert parameter_set().mode == DEFAULT_MODE == 2


@pytest.mark.parametrize(
    "mode,name", [(2, "Dilithium2"), (3, "Dilithium3"), (5, "Dilithium5")]
)
def test_names(mode, name):
    params = parameter_set(mode)
    assert params.name == name
    assert params.mode == mode


def test_dilithium2_sizes():
    params = parameter_set(2)
    assert params.public_key_bytes == 1312
    assert params.secret_key_bytes == 2560
    assert params.signature_bytes == 2420


@pytest.mark.parametrize(
    "mode,polyz,polyw1,polyeta",
    [(2, 576, 192, 96), (3, 640, 128, 128), (5, 640, 128, 96)],
)
def test_packed_sizes(mode, polyz, polyw1, polyeta):
    params = parameter_set(mode)
    assert params.polyz_packedbytes == polyz
    assert params.polyw1_packedbytes == polyw1
    assert params.polyeta_packedbytes == polyeta


@pytest.mark.parametrize("mode", [2, 3, 5])
def test_beta_is_tau_times_eta(mode):
    params = parameter_set(mode)
    assert params.beta == params.tau * params.eta


@pytest.mark.parametrize("mode", [2, 3, 5])
def test_gamma2_divides_q_minus_one(mode):
    params = parameter_set(mode)
    assert (Q - 1) % (2 * params.gamma2) == 0


@pytest.mark.parametrize("mode", [2, 3, 5])
def test_hint_bytes(mode):
    params = parameter_set(mode)
    assert params.polyvech_packedbytes == params.omega + params.k


def test_sizes_grow_with_mode():
    sizes = [parameter_set(m).signature_bytes for m in (2, 3, 5)]
    assert sizes == sorted(sizes)
    assert len(set(sizes)) == 3


@pytest.mark.parametrize("mode", [0, 1, 4, 6, "2", None])
def test_unsupported_mode(mode):
    with pytest.raises(ValueError):
        parameter_set(mode)


def test_parameter_set_is_frozen():
    params = parameter_set(2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.k = 5  # type: ignore[misc]
    assert isinstance(params, ParameterSet)
    assert params.k == 4
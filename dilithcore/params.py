"""Dilithium parameter sets and the byte sizes derived from them."""

from __future__ import annotations

from dataclasses import dataclass

SEEDBYTES = 32
CRHBYTES = 64
TRBYTES = 64
RNDBYTES = 32
N = 256
Q = 8380417
D = 13
ROOT_OF_UNITY = 1753

POLYT1_PACKEDBYTES = 320
POLYT0_PACKEDBYTES = 416

DEFAULT_MODE = 2
RANDOMIZED_SIGNING = True

_POLYZ_PACKEDBYTES = {1 << 17: 576, 1 << 19: 640}
_POLYW1_PACKEDBYTES = {(Q - 1) // 88: 192, (Q - 1) // 32: 128}
_POLYETA_PACKEDBYTES = {2: 96, 4: 128}


@dataclass(frozen=True)
class ParameterSet:
    """One Dilithium security level with its derived encoding sizes."""

    mode: int
    name: str
    k: int
    l: int  # noqa: E741
    eta: int
    tau: int
    beta: int
    gamma1: int
    gamma2: int
    omega: int
    ctildebytes: int

    @property
    def polyz_packedbytes(self) -> int:
        return _POLYZ_PACKEDBYTES[self.gamma1]

    @property
    def polyw1_packedbytes(self) -> int:
        return _POLYW1_PACKEDBYTES[self.gamma2]

    @property
    def polyeta_packedbytes(self) -> int:
        return _POLYETA_PACKEDBYTES[self.eta]

    @property
    def polyvech_packedbytes(self) -> int:
        return self.omega + self.k

    @property
    def public_key_bytes(self) -> int:
        return SEEDBYTES + self.k * POLYT1_PACKEDBYTES

    @property
    def secret_key_bytes(self) -> int:
        return (
            2 * SEEDBYTES
            + TRBYTES
            + self.l * self.polyeta_packedbytes
            + self.k * self.polyeta_packedbytes
            + self.k * POLYT0_PACKEDBYTES
        )

    @property
    def signature_bytes(self) -> int:
        return (
            self.ctildebytes
            + self.l * self.polyz_packedbytes
            + self.polyvech_packedbytes
        )


_PARAMETER_SETS = {
    2: ParameterSet(
        mode=2,
        name="Dilithium2",
        k=4,
        l=4,
        eta=2,
        tau=39,
        beta=78,
        gamma1=1 << 17,
        gamma2=(Q - 1) // 88,
        omega=80,
        ctildebytes=32,
    ),
    3: ParameterSet(
        mode=3,
        name="Dilithium3",
        k=6,
        l=5,
        eta=4,
        tau=49,
        beta=196,
        gamma1=1 << 19,
        gamma2=(Q - 1) // 32,
        omega=55,
        ctildebytes=48,
    ),
    5: ParameterSet(
        mode=5,
        name="Dilithium5",
        k=8,
        l=7,
        eta=2,
        tau=60,
        beta=120,
        gamma1=1 << 19,
        gamma2=(Q - 1) // 32,
        omega=75,
        ctildebytes=64,
    ),
}


def parameter_set(mode: int = DEFAULT_MODE) -> ParameterSet:
    """Return the parameter set for Dilithium mode 2, 3 or 5."""
    try:
        return _PARAMETER_SETS[mode]
    except (KeyError, TypeError):
        raise ValueError(f"unsupported Dilithium mode: {mode!r}") from None
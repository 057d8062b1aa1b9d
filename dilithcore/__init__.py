"""Dilithium building blocks: parameters, Keccak/SHAKE, NTT, hint packing and KAT request tools."""

__version__ = "0.1.0"
"""Binary-field elements, bit and field vectors, VOLE correlation checks,
public-parameter sizes and encoding, and VOLEitH MAC/key splitting."""

__version__ = "0.1.0"
__all__ = ["value_types", "vectors", "verification", "public_params", "svole_split"]
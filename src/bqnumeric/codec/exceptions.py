class NumericEncoderError(Exception):
    pass


class EncodeError(NumericEncoderError):
    pass


class DecodeError(NumericEncoderError):
    pass


class InvalidDecimalError(EncodeError):
    pass


class PrecisionLossError(EncodeError):
    def __init__(self, value: object, scale: int, max_scale: int) -> None:
        self.value = value
        self.scale = scale
        self.max_scale = max_scale
        super().__init__(
            f"Scale exceeds maximum: {scale} (allowed: {max_scale}) and the extra digits "
            f"of {value} are not zero."
        )


class OutOfRangeError(EncodeError, DecodeError):
    def __init__(self, value: object, max_precision: int) -> None:
        self.value = value
        self.max_precision = max_precision
        super().__init__(f"Numeric overflow: {value} (max precision: {max_precision} digits)")


class InvalidBytesError(DecodeError):
    pass

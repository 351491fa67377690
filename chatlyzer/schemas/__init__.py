from chatlyzer.schemas.conversion import AnalysisPayloadRead, ConversionRead, ConversionRequest, MessageRead

__all__ = [
    "ConversionRequest",
    "ConversionRead",
    "MessageRead",
    "AnalysisPayloadRead",
]

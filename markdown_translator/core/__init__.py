"""
Core translation modules
"""
from .models import (
    Direction,
    CredentialSet,
    TranslationRequest,
    ProviderResult,
    AdapterFailure,
    ErrorKind,
    ClassifiedError,
)
from .result import Ok, Err, Result
from .error_classifier import classify, classify_exception
from .validator import RequestValidator, parse_request
from .orchestrator import TranslationOrchestrator, ADAPTER_CHAIN
from .service import TranslationService

__all__ = [
    'Direction',
    'CredentialSet',
    'TranslationRequest',
    'ProviderResult',
    'AdapterFailure',
    'ErrorKind',
    'ClassifiedError',
    'Ok',
    'Err',
    'Result',
    'classify',
    'classify_exception',
    'RequestValidator',
    'parse_request',
    'TranslationOrchestrator',
    'ADAPTER_CHAIN',
    'TranslationService',
]

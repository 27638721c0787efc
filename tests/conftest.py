import pytest

from cryptolab.cipher_core import FeistelCipher, SPNCipher
from cryptolab.registry import get_engine

FEISTEL_KEY = '133457799BBCDFF1'
SPN_KEY = '2b7e151628aed2a6abf7158809cf4f3c'


@pytest.fixture
def feistel():
    return FeistelCipher()


@pytest.fixture
def spn():
    return SPNCipher()


@pytest.fixture(params=[('feistel', FEISTEL_KEY), ('spn', SPN_KEY)],
                ids=['feistel', 'spn'])
def engine_and_key(request):
    """Each message engine paired with a well-formed key."""
    name, key = request.param
    return get_engine(name), key

import pytest

from cryptolab.cipher_core import FeistelCipher, SPNCipher
from cryptolab.codec import PaddingPolicy, TextEncoding
from cryptolab.config import (FEISTEL_DEFAULT_PARAMS, SPN_DEFAULT_PARAMS,
                              Settings, load_settings)


def test_default_params_drive_ciphers():
    assert FeistelCipher.block_size == FEISTEL_DEFAULT_PARAMS['block_size'] == 8
    assert FeistelCipher.num_rounds == 16
    assert SPNCipher.key_size == SPN_DEFAULT_PARAMS['key_size'] == 16
    assert SPNCipher.num_rounds == 10


def test_defaults_when_unset():
    assert load_settings({}) == Settings()
    settings = load_settings({})
    assert settings.padding_policy is PaddingPolicy.LENIENT
    assert settings.text_encoding is TextEncoding.LATIN1
    assert settings.log_level == 'WARNING'


def test_reads_environment():
    settings = load_settings({
        'CRYPTOLAB_PADDING_POLICY': 'Strict',
        'CRYPTOLAB_TEXT_ENCODING': 'utf-8',
        'CRYPTOLAB_LOG_LEVEL': 'debug',
    })
    assert settings.padding_policy is PaddingPolicy.STRICT
    assert settings.text_encoding is TextEncoding.UTF8
    assert settings.log_level == 'DEBUG'


def test_empty_values_are_ignored():
    assert load_settings({'CRYPTOLAB_PADDING_POLICY': ''}) == Settings()


@pytest.mark.parametrize('variable,value', [
    ('CRYPTOLAB_PADDING_POLICY', 'sloppy'),
    ('CRYPTOLAB_TEXT_ENCODING', 'ebcdic'),
    ('CRYPTOLAB_LOG_LEVEL', 'loud'),
])
def test_invalid_values(variable, value):
    with pytest.raises(ValueError, match=variable):
        load_settings({variable: value})


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv('CRYPTOLAB_PADDING_POLICY', 'strict')
    assert load_settings().padding_policy is PaddingPolicy.STRICT

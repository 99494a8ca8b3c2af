from pydantic import ValidationError
import pytest

from src.platform.config.core_setting import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv('TICKET_PRICE', raising=False)
        settings = Settings(_env_file=None)

        assert settings.TICKET_PRICE == 100
        assert settings.PROJECT_NAME == 'Ticket Sales Ledger'

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv('TICKET_PRICE', '250')
        monkeypatch.setenv('ADMINISTRATOR_ID', '  box-office  ')

        settings = Settings(_env_file=None)

        assert settings.TICKET_PRICE == 250
        assert settings.ADMINISTRATOR_ID == 'box-office'

    @pytest.mark.parametrize('price', ['0', '-5'])
    def test_ticket_price_must_be_positive(self, monkeypatch, price):
        monkeypatch.setenv('TICKET_PRICE', price)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_blank_administrator_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, ADMINISTRATOR_ID='   ')

    def test_notification_history_size_default_and_override(self, monkeypatch):
        monkeypatch.delenv('NOTIFICATION_HISTORY_SIZE', raising=False)
        assert Settings(_env_file=None).NOTIFICATION_HISTORY_SIZE == 1000

        monkeypatch.setenv('NOTIFICATION_HISTORY_SIZE', '5')
        assert Settings(_env_file=None).NOTIFICATION_HISTORY_SIZE == 5

    @pytest.mark.parametrize('field', ['NOTIFICATION_BUFFER_SIZE', 'NOTIFICATION_HISTORY_SIZE'])
    def test_notification_sizes_cannot_be_negative(self, monkeypatch, field):
        monkeypatch.setenv(field, '-1')

        with pytest.raises(ValidationError, match=field):
            Settings(_env_file=None)

"""
Unit tests for EventCatalog

測試重點：
1. id 從 0 開始依序分配，不重複
2. 未知 id 一律拋出 EventNotFoundError，不回傳零值紀錄
3. stage/commit：commit 前的修改對外不可見
"""

import pytest

from src.platform.exception.exceptions import DomainError, LedgerInvariantError
from src.service.ticket_sales.domain.event_catalog import EventCatalog
from src.service.ticket_sales.domain.exception.ticket_sales_exceptions import EventNotFoundError


class TestCreateEvent:
    def test_ids_are_sequential_from_zero(self, catalog: EventCatalog):
        first = catalog.create_event(description='Concert', website='https://a.test', total_tickets=10)
        second = catalog.create_event(description='Play', website='https://b.test', total_tickets=5)

        assert (first, second) == (0, 1)
        assert len(catalog) == 2
        assert 1 in catalog
        assert 2 not in catalog

    def test_get_event_right_after_create(self, catalog: EventCatalog):
        """
        Given: a new event with 10 tickets
        When: reading it back
        Then: everything is available, nothing sold, event open
        """
        event_id = catalog.create_event(
            description='Concert', website='https://a.test', total_tickets=10
        )

        view = catalog.get_event(event_id=event_id)

        assert view.event_id == event_id
        assert view.description == 'Concert'
        assert view.website == 'https://a.test'
        assert view.tickets_available == 10
        assert view.sold == 0
        assert view.is_open is True

    def test_negative_capacity_is_rejected(self, catalog: EventCatalog):
        with pytest.raises(DomainError):
            catalog.create_event(description='Bad', website='', total_tickets=-5)
        assert len(catalog) == 0

    def test_failed_create_does_not_consume_an_id(self, catalog: EventCatalog):
        with pytest.raises(DomainError):
            catalog.create_event(description='Bad', website='', total_tickets=-1)

        assert catalog.create_event(description='Ok', website='', total_tickets=1) == 0


class TestLookup:
    def test_unknown_id_raises_not_found(self, catalog: EventCatalog):
        with pytest.raises(EventNotFoundError, match='Event 42 not found') as exc_info:
            catalog.get_event(event_id=42)
        assert exc_info.value.status_code == 404

    def test_unknown_buyer_holds_zero(self, catalog: EventCatalog):
        event_id = catalog.create_event(description='C', website='', total_tickets=1)

        assert catalog.get_buyer_ticket_count(event_id=event_id, buyer='ghost') == 0

    def test_list_events_in_id_order(self, catalog: EventCatalog):
        for name in ('a', 'b', 'c'):
            catalog.create_event(description=name, website='', total_tickets=1)

        assert [v.description for v in catalog.list_events()] == ['a', 'b', 'c']


class TestCloseEvent:
    def test_close_is_idempotent(self, catalog: EventCatalog):
        event_id = catalog.create_event(description='C', website='', total_tickets=1)

        catalog.close_event(event_id=event_id)
        catalog.close_event(event_id=event_id)

        assert catalog.get_event(event_id=event_id).is_open is False

    def test_close_unknown_event(self, catalog: EventCatalog):
        with pytest.raises(EventNotFoundError):
            catalog.close_event(event_id=3)


class TestStageAndCommit:
    def test_staged_changes_invisible_until_commit(self, catalog: EventCatalog):
        event_id = catalog.create_event(description='C', website='', total_tickets=5)

        staged = catalog.stage(event_id)
        staged.apply_purchase(buyer='alice', num_tickets=2, cost=200)

        assert catalog.get_event(event_id=event_id).sold == 0
        assert catalog.get_buyer_ticket_count(event_id=event_id, buyer='alice') == 0

        catalog.commit(staged)

        assert catalog.get_event(event_id=event_id).sold == 2
        assert catalog.get_buyer_ticket_count(event_id=event_id, buyer='alice') == 2

    def test_commit_rejects_inconsistent_record(self, catalog: EventCatalog):
        event_id = catalog.create_event(description='C', website='', total_tickets=5)

        staged = catalog.stage(event_id)
        staged.inventory.record_sale(1)  # sold without holdings

        with pytest.raises(LedgerInvariantError):
            catalog.commit(staged)
        assert catalog.get_event(event_id=event_id).sold == 0

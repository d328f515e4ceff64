import threading
import time

from shop_services.core.store import ReadWriteLock, RecordStore
from shop_services.schemas.order import SEED_ORDERS, Order
from shop_services.schemas.user import SEED_USERS, User


def test_seeded_store_starts_after_fixtures():
    store = RecordStore(SEED_USERS)
    assert [u.id for u in store.list()] == [1, 2]
    assert store.next_id == 3


def test_create_assigns_counter_value_and_overwrites_client_id():
    store = RecordStore(SEED_USERS)
    before = store.next_id
    created = store.create(User(id=99, name="Eve", email="eve@example.com"))
    assert created.id == before
    assert store.next_id == before + 1
    assert store.get(99) is None
    assert store.get(before).name == "Eve"


def test_ids_are_never_reused():
    store = RecordStore(start_id=10)
    ids = [store.create(User(name=str(i))).id for i in range(5)]
    assert ids == [10, 11, 12, 13, 14]


def test_get_missing_returns_none_without_side_effects():
    store = RecordStore(SEED_ORDERS)
    assert store.get(404) is None
    assert len(store) == 2
    assert store.next_id == 3


def test_no_field_validation():
    store = RecordStore(SEED_ORDERS)
    order = store.create(Order(user_id=1, product="", quantity=-5))
    assert order.quantity == -5


def test_returned_records_are_snapshots():
    store = RecordStore(SEED_USERS)
    listed = store.list()
    listed[0].name = "changed"
    fetched = store.get(2)
    fetched.name = "changed"
    assert store.get(1).name == SEED_USERS[0].name
    assert store.get(2).name == SEED_USERS[1].name


def test_concurrent_creates_assign_unique_ids():
    store = RecordStore(SEED_USERS)
    results = []
    results_lock = threading.Lock()

    def worker():
        local = [store.create(User(name="w")).id for _ in range(50)]
        with results_lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 400
    assert len(set(results)) == 400
    assert sorted(results) == list(range(3, 403))
    assert store.next_id == 403


def test_writer_waits_for_reader():
    lock = ReadWriteLock()
    wrote = threading.Event()

    def writer():
        with lock.write_locked():
            wrote.set()

    with lock.read_locked():
        t = threading.Thread(target=writer)
        t.start()
        time.sleep(0.05)
        assert not wrote.is_set()
    t.join(timeout=1)
    assert wrote.is_set()


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    with lock.read_locked():
        t = threading.Thread(target=reader)
        t.start()
        assert entered.wait(timeout=1)
    t.join(timeout=1)


def test_reader_waits_for_writer():
    lock = ReadWriteLock()
    read = threading.Event()

    def reader():
        with lock.read_locked():
            read.set()

    with lock.write_locked():
        t = threading.Thread(target=reader)
        t.start()
        time.sleep(0.05)
        assert not read.is_set()
    t.join(timeout=1)
    assert read.is_set()

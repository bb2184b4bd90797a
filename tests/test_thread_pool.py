import threading

import pytest

from cubeworld.thread_pool import ThreadPool


def test_all_jobs_run_before_shutdown_returns():
    results = []
    lock = threading.Lock()

    def make_job(n):
        def job():
            with lock:
                results.append(n)
        return job

    with ThreadPool(4) as pool:
        for n in range(100):
            pool.add_job(make_job(n))
    assert sorted(results) == list(range(100))
    with pytest.raises(RuntimeError):
        pool.add_job(make_job(100))
    assert len(results) == 100


def test_queued_jobs_drained_with_single_thread():
    gate = threading.Event()
    order = []
    pool = ThreadPool(1)
    pool.add_job(gate.wait)
    for n in range(5):
        pool.add_job(lambda n=n: order.append(n))
    gate.set()
    pool.shutdown()
    assert order == list(range(5))


def test_jobs_run_on_worker_threads():
    idents = set()
    main = threading.get_ident()
    with ThreadPool(2) as pool:
        for _ in range(10):
            pool.add_job(lambda: idents.add(threading.get_ident()))
    assert idents
    assert main not in idents


def test_add_job_after_shutdown_raises():
    pool = ThreadPool(2)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.add_job(lambda: None)
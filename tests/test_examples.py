import threading

import pytest

from semagroup.examples import (
    blocking_reserve_example,
    fetch_all,
    main,
    select_wait_example,
    wait_group_example,
)

pytestmark = pytest.mark.timeout(30)


def test_wait_group_example_runs_all():
    assert wait_group_example(10) == 10


def test_select_wait_example_finishes():
    assert select_wait_example(5, 5.0) is True


def test_blocking_reserve_example_runs_all():
    assert blocking_reserve_example(10, 5, 10, 10.0) == 10


def test_blocking_reserve_example_too_heavy():
    assert blocking_reserve_example(workers=2, weight=5, size=3, timeout=0.05) == 0


def test_fetch_all_keeps_order():
    urls = [
        "http://www.example.com/",
        "http://www.example.org/",
        "http://www.example.net/a",
    ]
    assert fetch_all(urls, lambda url: url.upper()) == [url.upper() for url in urls]


def test_fetch_all_fetches_each_url():
    urls = ["http://www.example.com/one", "http://www.example.com/two"]
    seen = []
    lock = threading.Lock()

    def fetch(url):
        with lock:
            seen.append(url)
        return len(url)

    assert fetch_all(urls, fetch) == [26, 26]
    assert sorted(seen) == sorted(urls)


def test_main_wait_group(capsys):
    assert main(["wait-group", "--workers", "3"]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_main_select_wait(capsys):
    assert main(["select-wait", "--workers", "2", "--timeout", "5"]) == 0
    assert capsys.readouterr().out.strip() == "True"


def test_main_rejects_unknown_example():
    with pytest.raises(SystemExit):
        main(["nope"])
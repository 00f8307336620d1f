import pytest
from proverbs import Engine

def _records(n: int) -> list[dict]:
    return [
        {"sourceText": f"awal {i}", "translatedText": f"parole {i}", "theme": "Sagesse" if i % 2 else "Vie"}
        for i in range(n)
    ]

@pytest.mark.e2e
@pytest.mark.parametrize("limit", [1, 3, 4, 50])
def test_pages_cover_every_match_exactly_once(limit):
    eng = Engine()
    try:
        eng.build(_records(11))
        total = eng.query(theme="sagesse").total_results
        assert total == 5

        seen = []
        page = 0
        while page * limit < total:
            res = eng.query(theme="sagesse", page=str(page), limit=str(limit))
            assert res.total_results == total
            assert res.current_page == page
            assert len(res.proverbs) <= limit
            seen.extend(p.id for p in res.proverbs)
            page += 1
        assert seen == [1, 3, 5, 7, 9]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_out_of_range_page_is_empty_with_same_total():
    eng = Engine()
    try:
        eng.build(_records(11))
        res = eng.query(page="5", limit="3")
        assert res.proverbs == ()
        assert res.total_results == 11
        assert res.current_page == 5
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_negative_page_is_empty():
    eng = Engine()
    try:
        eng.build(_records(11))
        for page in ("-1", "-2"):
            res = eng.query(page=page, limit="3")
            assert res.proverbs == ()
            assert res.total_results == 11
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_same_query_is_deterministic_and_set_is_untouched():
    eng = Engine()
    try:
        eng.build(_records(11))
        before = eng.proverbs
        first = eng.query(search="awal", theme="vie", page="1", limit="2").to_dict()
        second = eng.query(search="awal", theme="vie", page="1", limit="2").to_dict()
        assert first == second
        assert eng.proverbs is before
        assert [p.id for p in eng.proverbs] == list(range(11))
    finally:
        eng.shutdown()

from wordboard.app.seed import seed
from wordboard.app.services import word_list_service, word_service


def test_seed_creates_demo_lists(session):
    seed(session)
    items, _ = word_list_service.list_lists(session)
    assert sorted(wl.slug for wl in items) == ["basic", "feelings"]

    feelings = word_list_service.get_by_slug(session, "feelings")
    assert [w.text for w in word_service.list_by_list_id(session, feelings.id)][0] == "anger"


def test_seed_is_repeatable(session):
    seed(session)
    seed(session)
    items, _ = word_list_service.list_lists(session)
    assert len(items) == 2

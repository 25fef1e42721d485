"""
Tests for play page rendering
"""
import pytest

from games.dispatcher import dispatch, mount_point_id


@pytest.mark.django_db
def test_mount_point_id_is_slug(platformer):
    assert mount_point_id(platformer) == 'platformer'


@pytest.mark.django_db
def test_mount_point_id_is_stable(platformer):
    assert mount_point_id(platformer) == mount_point_id(platformer)


@pytest.mark.django_db
def test_dispatch_renders_single_mount_point(rf, platformer):
    response = dispatch(rf.get('/games/platformer/'), platformer)
    html = response.content.decode()

    assert response.status_code == 200
    assert html.count('data-game-mount') == 1
    assert 'id="platformer"' in html
    assert 'data-api-url="/api/games/platformer/"' in html


@pytest.mark.django_db
def test_dispatch_twice_gives_same_document(rf, platformer):
    first = dispatch(rf.get('/games/platformer/'), platformer)
    second = dispatch(rf.get('/games/platformer/'), platformer)
    assert first.content == second.content

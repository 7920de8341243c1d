import pytest

from spellseeker.enemy import Enemy
from spellseeker.roster import EnemyRoster


def test_new_roster_is_empty():
    roster = EnemyRoster()
    assert roster.enemies() == []
    assert len(roster) == 0


def test_add_keeps_insertion_order():
    roster = EnemyRoster()
    enemies = [Enemy(health=h) for h in (10.0, 20.0, 30.0)]
    for enemy in enemies:
        roster.add(enemy)
    assert roster.enemies() == enemies
    assert list(roster) == enemies
    assert len(roster) == len(enemies)


def test_enemy_at_returns_same_object():
    roster = EnemyRoster()
    first, second = Enemy(), Enemy(health=5.0)
    roster.add(first)
    roster.add(second)
    assert roster.enemy_at(0) is first
    assert roster.enemy_at(1) is second


def test_enemy_at_sees_state_changes():
    roster = EnemyRoster()
    enemy = Enemy(health=3.0)
    roster.add(enemy)
    enemy.take_damage(3.0)
    assert roster.enemy_at(0).dead is True


def test_enemies_returns_a_copy():
    roster = EnemyRoster()
    roster.add(Enemy())
    snapshot = roster.enemies()
    snapshot.clear()
    assert len(roster) == 1


def test_same_enemy_can_be_added_twice():
    roster = EnemyRoster()
    enemy = Enemy()
    roster.add(enemy)
    roster.add(enemy)
    assert roster.enemy_at(0) is roster.enemy_at(1)


@pytest.mark.parametrize("index", [-1, 1, 10])
def test_enemy_at_out_of_range_raises(index):
    roster = EnemyRoster()
    roster.add(Enemy())
    with pytest.raises(IndexError):
        roster.enemy_at(index)


def test_enemy_at_on_empty_roster_raises():
    with pytest.raises(IndexError):
        EnemyRoster().enemy_at(0)
from dailyquiz import db
from dailyquiz.models import UserRecord
from dailyquiz.services.quiz import compute_ranks, publish_ranks, reset_ranks


def user(email, correct, time):
    return {'email': email, 'number_of_correct_ans': correct, 'time': time, 'rank': 0}


def test_more_correct_answers_rank_first():
    ranked = compute_ranks([
        user('a@x.io', 1, '00:00:10'),
        user('b@x.io', 3, '00:05:00'),
        user('c@x.io', 2, '00:00:01'),
    ])
    assert [u['email'] for u in ranked] == ['b@x.io', 'c@x.io', 'a@x.io']
    assert [u['rank'] for u in ranked] == [1, 2, 3]


def test_faster_time_breaks_ties():
    ranked = compute_ranks([
        user('slow@x.io', 2, '00:01:00'),
        user('fast@x.io', 2, '00:00:59'),
    ])
    assert ranked[0]['email'] == 'fast@x.io'


def test_durations_compared_numerically():
    # "100:00:00" sorts before "99:00:00" as text
    ranked = compute_ranks([
        user('long@x.io', 1, '100:00:00'),
        user('short@x.io', 1, '99:00:00'),
    ])
    assert ranked[0]['email'] == 'short@x.io'


def test_full_ties_keep_input_order_with_distinct_ranks():
    users = [user(f'u{i}@x.io', 1, '00:00:10') for i in range(4)]
    first = compute_ranks(users)
    second = compute_ranks(users)
    assert [u['email'] for u in first] == [u['email'] for u in users]
    assert [u['rank'] for u in first] == [1, 2, 3, 4]
    assert first == second


def test_compute_ranks_does_not_mutate_input():
    users = [user('a@x.io', 1, '00:00:10')]
    compute_ranks(users)
    assert users[0]['rank'] == 0


def test_publish_ranks_persists_every_user(store):
    db.session.add_all([
        UserRecord(email='a@x.io', correct_count=1, elapsed='00:00:10'),
        UserRecord(email='b@x.io', correct_count=4, elapsed='00:00:30'),
        UserRecord(email='c@x.io', correct_count=4, elapsed='00:00:20'),
    ])
    db.session.commit()

    ranked = publish_ranks(store)

    assert [u['email'] for u in ranked] == ['c@x.io', 'b@x.io', 'a@x.io']
    db.session.expire_all()
    stored = {u.email: u.rank for u in UserRecord.query.all()}
    assert stored == {'c@x.io': 1, 'b@x.io': 2, 'a@x.io': 3}


def test_publish_ranks_with_no_users(store):
    assert publish_ranks(store) == []


def test_reset_ranks_clears_stale_ranks(store):
    db.session.add_all([
        UserRecord(email='a@x.io', correct_count=1, elapsed='00:00:10', rank=2),
        UserRecord(email='b@x.io', correct_count=4, elapsed='00:00:30', rank=1),
        UserRecord(email='c@x.io', correct_count=0, elapsed='00:00:00', rank=0),
    ])
    db.session.commit()

    assert reset_ranks(store) == 2
    db.session.expire_all()
    assert {u.rank for u in UserRecord.query.all()} == {0}

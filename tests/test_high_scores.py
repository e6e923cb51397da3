from katas.high_scores import HighScores


def test_list_of_scores():
    expected = [30, 50, 20, 70]
    assert HighScores(expected).scores() == expected


def test_latest_score():
    assert HighScores([100, 0, 90, 30]).latest() == 30


def test_personal_best():
    assert HighScores([40, 100, 70]).personal_best() == 100


def test_personal_top_three_from_a_list_of_scores():
    scores = HighScores([10, 30, 90, 30, 100, 20, 10, 0, 30, 40, 40, 70, 70])
    assert scores.personal_top_three() == [100, 90, 70]


def test_personal_top_highest_to_lowest():
    assert HighScores([20, 10, 30]).personal_top_three() == [30, 20, 10]


def test_personal_top_when_there_is_a_tie():
    assert HighScores([40, 20, 40, 30]).personal_top_three() == [40, 40, 30]


def test_personal_top_when_there_are_less_than_3():
    assert HighScores([30, 70]).personal_top_three() == [70, 30]


def test_personal_top_when_there_is_only_one():
    assert HighScores([40]).personal_top_three() == [40]


def test_latest_score_unchanged_after_personal_top_scores():
    scores = HighScores([70, 50, 20, 30])
    scores.personal_top_three()
    assert scores.latest() == 30


def test_scores_unchanged_after_personal_top_scores():
    expected = [30, 50, 20, 70]
    scores = HighScores(expected)
    scores.personal_top_three()
    assert scores.scores() == expected


def test_latest_score_unchanged_after_personal_best():
    scores = HighScores([20, 70, 15, 25, 30])
    scores.personal_best()
    assert scores.latest() == 30


def test_scores_unchanged_after_personal_best():
    expected = [20, 70, 15, 25, 30]
    scores = HighScores(expected)
    scores.personal_best()
    assert scores.scores() == expected


def test_returned_scores_cannot_modify_state():
    scores = HighScores([1, 2, 3])
    scores.scores().append(99)
    assert scores.scores() == [1, 2, 3]


def test_latest_score_empty():
    assert HighScores([]).latest() is None


def test_personal_best_empty():
    assert HighScores([]).personal_best() is None


def test_personal_top_three_empty():
    assert HighScores([]).personal_top_three() == []
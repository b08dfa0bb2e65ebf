import allure
import pytest

from english_teach.models import Level, Player, calculate_level, get_level_info, new_player

pytestmark = pytest.mark.unit


@allure.feature("Player levels")
class TestLevels:

    @pytest.mark.parametrize(
        "score, expected",
        [
            (0, Level.BRONZE),
            (49, Level.BRONZE),
            (50, Level.SILVER),
            (199, Level.SILVER),
            (200, Level.GOLD),
            (499, Level.GOLD),
            (500, Level.DIAMOND),
            (10_000, Level.DIAMOND),
        ],
    )
    def test_threshold(self, score, expected):
        assert calculate_level(score) == expected

    def test_player_level_follows_score(self):
        player = Player(name="Noa", total_score=250, level=Level.BRONZE)
        assert player.level == Level.GOLD

    def test_score_never_negative(self):
        assert Player(total_score=-5).total_score == 0

    def test_merged_recomputes_level(self):
        player = new_player().merged(total_score=50)
        assert player.level == Level.SILVER
        assert player.merged(total_score=49).level == Level.BRONZE

    def test_camel_case_wire_format(self):
        player = Player.model_validate({"name": "Ari", "totalScore": 7, "level": "bronze", "gamesPlayed": 2})
        assert player.total_score == 7
        assert player.to_json_dict() == {"name": "Ari", "totalScore": 7, "level": "bronze", "gamesPlayed": 2}

    def test_level_info(self):
        assert get_level_info(Level.BRONZE).next_at == 50
        assert get_level_info(Level.GOLD).next_at == 500
        assert get_level_info(Level.DIAMOND).next_at is None

    def test_rank_order(self):
        assert Level.BRONZE.rank < Level.SILVER.rank < Level.GOLD.rank < Level.DIAMOND.rank

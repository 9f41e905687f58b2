"""Unit tests for the synthetic value fillers."""

from datetime import datetime, timedelta, timezone

from pkg.defaults.defaults import RandomDefaultsFiller, StrictDefaultsFiller, new_defaults_filler


class TestRandomDefaultsFiller:
    """Values stay inside their documented ranges."""

    def test_seeded_output_is_reproducible(self):
        a = RandomDefaultsFiller(seed=7)
        b = RandomDefaultsFiller(seed=7)
        assert [a.social_mentions() for _ in range(5)] == [b.social_mentions() for _ in range(5)]

    def test_token_price_buckets(self):
        filler = RandomDefaultsFiller(seed=1)
        for _ in range(50):
            assert 10 <= filler.token_price(5_000_000_000) <= 1000
            assert 1 <= filler.token_price(500_000_000) <= 100
            assert 0.01 <= filler.token_price(5_000_000) <= 10
            assert 0.0001 <= filler.token_price(0) <= 1

    def test_nft_ranges(self):
        filler = RandomDefaultsFiller(seed=2)
        for _ in range(50):
            assert 1000 <= filler.nft_total_supply() <= 9999
            assert 100 <= filler.nft_owners() <= 2099
            assert 0 <= filler.nft_sales_24h() <= 49
            assert -10 <= filler.nft_change_24h() <= 10
            assert 0 <= filler.nft_volume_24h() <= 100

    def test_created_date_within_a_year(self):
        now = datetime(2025, 6, 1, tzinfo=timezone.utc)
        created = RandomDefaultsFiller(seed=3).created_date(now)
        assert now - timedelta(days=365) <= created <= now


class TestStrictDefaultsFiller:
    """Strict mode reports zeros and no dates."""

    def test_zeros(self):
        filler = StrictDefaultsFiller()
        assert filler.token_price(1e12) == 0.0
        assert filler.social_mentions() == 0
        assert filler.nft_total_supply() == 0
        assert filler.nft_owners() == 0

    def test_created_date_left_unset(self):
        assert StrictDefaultsFiller().created_date(datetime(2025, 6, 1, tzinfo=timezone.utc)) is None


class TestFactory:
    def test_enabled(self):
        assert isinstance(new_defaults_filler(True, seed=1), RandomDefaultsFiller)

    def test_disabled(self):
        assert isinstance(new_defaults_filler(False), StrictDefaultsFiller)

from blogfront.formatting import long_date, read_time_label, read_time_minutes, short_date


class TestReadTime:
    def test_400_words_is_two_minutes(self):
        content = " ".join(["word"] * 400)
        assert read_time_label(content) == "2 min"

    def test_rounds_up(self):
        assert read_time_minutes(" ".join(["w"] * 201)) == 2

    def test_short_text_is_one_minute(self):
        assert read_time_minutes("just a few words") == 1

    def test_empty_counts_as_one_word(self):
        assert read_time_minutes("") == 1


class TestDates:
    def test_long_date(self):
        assert long_date("2025-01-05T10:00:00.000Z") == "January 5, 2025"

    def test_short_date(self):
        assert short_date("2025-01-05T10:00:00.000Z") == "1/5/2025"

    def test_unparseable_is_returned_raw(self):
        assert long_date("yesterday") == "yesterday"
        assert short_date("") == ""

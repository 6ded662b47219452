from backend.estg_portal.common.pagination import ShowMore, get_show_arg


class TestShowMore:

    def test_first_window(self):
        window = ShowMore(shown=6, step=3, total=10)
        assert window.slice(range(10)) == [0, 1, 2, 3, 4, 5]
        assert window.has_more
        assert window.next_shown == 9

    def test_last_window(self):
        window = ShowMore(shown=12, step=3, total=10)
        assert len(window.slice(range(10))) == 10
        assert not window.has_more

    def test_exact_fit_has_no_more(self):
        assert not ShowMore(shown=6, step=3, total=6).has_more

    def test_invalid_values_are_clamped(self):
        window = ShowMore(shown=0, step=0, total=-1)
        assert window.shown == 1
        assert window.step == 1
        assert window.total == 0


class TestGetShowArg:

    def test_default_when_missing(self, app):
        with app.test_request_context("/events"):
            assert get_show_arg(6) == 6

    def test_reads_query_string(self, app):
        with app.test_request_context("/events?show=9"):
            assert get_show_arg(6) == 9

    def test_custom_parameter(self, app):
        with app.test_request_context("/events/1?more=6"):
            assert get_show_arg(3, param='more') == 6

    def test_garbage_falls_back_to_default(self, app):
        with app.test_request_context("/events?show=abc"):
            assert get_show_arg(6) == 6

    def test_bounds(self, app):
        with app.test_request_context("/events?show=-4"):
            assert get_show_arg(6) == 1
        with app.test_request_context("/events?show=100000"):
            assert get_show_arg(6) == 500

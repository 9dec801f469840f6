"""Tests for the Session Gate."""

import pytest

from desk.models import SessionCredential
from desk.session import GateDecision, PathKind, SessionGate, classify_path

SIGNED_IN = SessionCredential(access_token="abc")
SIGNED_OUT = SessionCredential.anonymous()


class TestClassifyPath:
    """Tests for classify_path()."""

    @pytest.mark.parametrize(
        "path",
        [
            "/dashboard",
            "/dashboard/check-in/hotel",
            "/checkin/anything",
            "/admin/users",
            "/faculty/1",
        ],
    )
    def test_protected(self, path):
        assert classify_path(path) is PathKind.PROTECTED

    def test_login(self):
        assert classify_path("/") is PathKind.LOGIN

    @pytest.mark.parametrize(
        "path", ["/healthz", "/reset-password/tok", "/dashboards", "/administrator"]
    )
    def test_open(self, path):
        assert classify_path(path) is PathKind.OPEN


class TestDecide:
    """Truth table of SessionGate.decide()."""

    @pytest.mark.parametrize(
        "session,path,expected",
        [
            (SIGNED_OUT, "/", GateDecision.SERVE_LOGIN),
            (SIGNED_OUT, "/dashboard", GateDecision.REDIRECT_LOGIN),
            (SIGNED_IN, "/", GateDecision.REDIRECT_DASHBOARD),
            (SIGNED_IN, "/dashboard/check-in/hotel", GateDecision.SERVE),
        ],
    )
    def test_truth_table(self, session, path, expected):
        assert SessionGate().decide(path, session) is expected

    def test_open_paths_pass_either_way(self):
        gate = SessionGate()
        assert gate.decide("/healthz", SIGNED_OUT) is GateDecision.PASS
        assert gate.decide("/healthz", SIGNED_IN) is GateDecision.PASS

    def test_redirect_targets(self):
        assert GateDecision.REDIRECT_LOGIN.redirect_to == "/"
        assert GateDecision.REDIRECT_DASHBOARD.redirect_to == "/dashboard"
        assert GateDecision.SERVE.redirect_to is None
        assert GateDecision.SERVE_LOGIN.redirect_to is None

"""
Tests for team administration through `keybase team`.
"""

import pytest

pytestmark = pytest.mark.fast

from keybase_local import team
from keybase_local.exceptions import KeybaseNotRunningError, TeamError


def argv(mock_run):
    return mock_run.call_args.args[0]


class TestTeamNames:

    @pytest.mark.parametrize("name", ["acme", "acme_corp", "a1", "acme.devs", "acme.devs.ops", "x_"])
    def test_valid(self, name):
        assert team.valid_team_name(name)

    @pytest.mark.parametrize("name", ["", "_acme", "acme__corp", "acme-corp", "acme.", ".acme", "ac me"])
    def test_invalid(self, name):
        assert not team.valid_team_name(name)

    def test_invalid_name_rejected_before_spawning(self, ready, mock_run):
        with pytest.raises(TeamError, match="invalid team name"):
            team.create("bad name")
        mock_run.assert_not_called()


class TestListing:

    def test_list_memberships(self, ready, mock_run, completed):
        mock_run.return_value = completed('{"teams": [{"fq_name": "acme"}]}')

        assert team.list_memberships() == {"teams": [{"fq_name": "acme"}]}
        assert argv(mock_run) == ["keybase", "team", "list-memberships", "--json"]

    def test_list_memberships_force_poll(self, ready, mock_run):
        team.list_memberships(force_poll=True)
        assert argv(mock_run) == ["keybase", "team", "list-memberships", "--json", "--force-poll"]

    def test_list_members(self, ready, mock_run):
        team.list_members("acme")
        assert argv(mock_run) == ["keybase", "team", "list-members", "acme", "--json"]

    def test_list_members_force_poll(self, ready, mock_run):
        team.list_members("acme", force_poll=True)
        assert argv(mock_run)[-1] == "--force-poll"

    def test_list_requests(self, ready, mock_run):
        team.list_requests()
        assert argv(mock_run) == ["keybase", "team", "list-requests", "--json"]

    def test_empty_output(self, ready, mock_run, completed):
        mock_run.return_value = completed("")
        assert team.list_memberships() == {}

    def test_failure_raises_with_stderr(self, ready, mock_run, completed):
        mock_run.return_value = completed("", returncode=1, stderr="You are not a member of acme\n")
        with pytest.raises(TeamError) as exc:
            team.list_members("acme")
        assert exc.value.message == "You are not a member of acme"

    def test_payload_goes_to_stdin(self, ready, mock_run):
        team.team_call("api", payload='{"method": "list-self-memberships"}', json=True)
        assert mock_run.call_args.kwargs["input"] == '{"method": "list-self-memberships"}'

    def test_payload_needs_json_mode(self, ready, mock_run):
        with pytest.raises(TeamError, match="JSON-mode"):
            team.team_call("create", "acme", payload='{"x": 1}')
        mock_run.assert_not_called()

    def test_requires_running_keybase(self, mock_run, process_names):
        with pytest.raises(KeybaseNotRunningError):
            team.list_memberships()
        mock_run.assert_not_called()


class TestAdministration:
    """Commands that only report success."""

    def test_create(self, ready, mock_run, completed):
        mock_run.return_value = completed(returncode=0)
        assert team.create("acme") is True
        assert argv(mock_run) == ["keybase", "team", "create", "acme"]

    def test_failure_is_false(self, ready, mock_run, completed):
        mock_run.return_value = completed(returncode=1)
        assert team.create("acme") is False

    def test_add_member(self, ready, mock_run):
        team.add_member("acme", "bob", role="writer")
        assert argv(mock_run) == ["keybase", "team", "add-member", "acme", "--user=bob", "--role=writer"]

    def test_add_member_by_email(self, ready, mock_run):
        team.add_member("acme", "bob@example.com", email=True)
        assert argv(mock_run) == [
            "keybase", "team", "add-member", "acme", "--email=bob@example.com", "--role=reader",
        ]

    def test_invalid_role(self, ready, mock_run):
        with pytest.raises(TeamError, match="invalid role"):
            team.add_member("acme", "bob", role="janitor")
        mock_run.assert_not_called()

    def test_remove_member(self, ready, mock_run):
        team.remove_member("acme", "bob")
        assert argv(mock_run) == ["keybase", "team", "remove-member", "acme", "--user=bob"]

    def test_edit_member(self, ready, mock_run):
        team.edit_member("acme", "bob", role="admin")
        assert argv(mock_run) == ["keybase", "team", "edit-member", "acme", "--user=bob", "--role=admin"]

    def test_rename(self, ready, mock_run):
        team.rename("acme.devs", "acme.engineering")
        assert argv(mock_run) == ["keybase", "team", "rename", "acme.devs", "acme.engineering"]

    def test_request_access(self, ready, mock_run):
        team.request_access("acme")
        assert argv(mock_run) == ["keybase", "team", "request-access", "acme"]

    def test_ignore_request(self, ready, mock_run):
        team.ignore_request("acme", "mallory")
        assert argv(mock_run) == ["keybase", "team", "ignore-request", "acme", "--user=mallory"]

    def test_accept_invite(self, ready, mock_run):
        team.accept_invite("s3cr3t")
        assert argv(mock_run) == ["keybase", "team", "accept-invite", "--token=s3cr3t"]

    def test_accept_invite_needs_token(self, ready, mock_run):
        with pytest.raises(TeamError):
            team.accept_invite("")

    def test_leave(self, ready, mock_run):
        team.leave("acme")
        assert argv(mock_run) == ["keybase", "team", "leave", "acme"]

        team.leave("acme", permanent=True)
        assert argv(mock_run) == ["keybase", "team", "leave", "acme", "--permanent"]

    def test_delete(self, ready, mock_run):
        team.delete("acme")
        assert argv(mock_run) == ["keybase", "team", "delete", "acme"]

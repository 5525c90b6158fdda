from dep_update_detector.bot_detector import DEPENDABOT, BotIdentity, is_bot_commit
from dep_update_detector.repo_client import Commit, User


def test_dependabot_identity():
    assert DEPENDABOT.author == "dependabot[bot]"
    assert DEPENDABOT.account_id == 49699333


def test_bot_commit_detection():
    assert is_bot_commit(Commit(committer=User(login="dependabot[bot]", id=49699333))) is True
    assert is_bot_commit(Commit(committer=User(login="dependabot[bot]", id=1))) is False
    assert is_bot_commit(Commit(committer=User(login="renamed", id=49699333))) is True
    assert is_bot_commit(Commit()) is False


def test_custom_identity():
    renovate = BotIdentity(author="renovate[bot]", account_id=29139614)
    commit = Commit(committer=User(login="renovate[bot]", id=29139614))
    assert is_bot_commit(commit, renovate) is True
    assert is_bot_commit(commit) is False

"""Shared test configuration and fixtures."""

import os
import sys
from unittest.mock import AsyncMock, Mock, patch

import pytest

sys.path.append("src")

ADMIN_TOKEN = "test_admin_token"


def make_snapshot(document_id, data, exists=True):
    """Build a stand-in for a Firestore DocumentSnapshot."""
    snapshot = Mock()
    snapshot.id = document_id
    snapshot.exists = exists
    snapshot.to_dict.return_value = data if exists else None
    return snapshot


@pytest.fixture(autouse=True)
def admin_env():
    """Configure the admin token and a testing environment for every test."""
    with patch.dict(
        os.environ,
        {
            "ADMIN_AUTH_TOKEN": ADMIN_TOKEN,
            "ENVIRONMENT": "testing",
            "PARTY_CACHE_TTL_SECONDS": "0",
            "LOG_FILE_ENABLED": "false",
        },
    ):
        yield


@pytest.fixture(autouse=True)
def clean_lru_cache():
    """Clear cached settings and the shared party cache between tests."""
    from policy_admin.config.settings import get_settings
    from policy_admin.services.party.cache import get_party_cache

    get_settings.cache_clear()
    get_party_cache.cache_clear()

    yield

    get_settings.cache_clear()
    get_party_cache.cache_clear()


@pytest.fixture
def auth_headers():
    """Bearer header carrying the test admin token."""
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def policy_document():
    """A fully populated policy document as stored in Firestore."""
    return {
        "Title": "子育て支援給付の拡充",
        "Description": "児童手当の所得制限を撤廃する",
        "AffectedFields": ["子育て", "社会保障"],
        "Status": "可決",
        "ProposedDate": "2024年3月",
        "SupportRate": 70,
        "NonSupportRate": 30,
        "KeyPoints": ["所得制限撤廃", "支給額の増額"],
        "EconomicImpact": "年間1兆円規模",
        "LifeImpact": "子育て世帯の負担軽減",
        "PoliticalParties": [
            {"PartyName": "公明党", "Claims": "全ての子どもに支援を"},
            {"PartyName": "日本共産党", "Claims": "財源は大企業課税で"},
        ],
        "totalCommentCount": 12,
    }


@pytest.fixture
def party_documents():
    """Raw party documents for the parties collection."""
    return [
        make_snapshot(
            "ldp",
            {
                "name": "自由民主党",
                "supportCount": 30,
                "oppositionCount": 10,
                "memberCount": 376,
                "majorPolicies": ["経済成長", "防衛力強化"],
                "overview": "保守政党",
            },
        ),
        make_snapshot(
            "cdp",
            {
                "name": "立憲民主党",
                "supportCount": 0,
                "oppositionCount": 0,
            },
        ),
    ]


@pytest.fixture
def mock_party_repository(party_documents):
    """Party repository returning the sample documents."""
    repository = Mock()
    repository.get_all_parties = AsyncMock(return_value=party_documents)
    return repository


@pytest.fixture
def mock_policy_repository():
    """Policy repository with no documents; tests set return values."""
    repository = Mock()
    repository.query_policies = AsyncMock(return_value=[])
    repository.get_snapshot = AsyncMock(
        return_value=make_snapshot("missing", None, exists=False)
    )
    return repository

"""Pytest fixtures for OneAssist tests."""

import pytest

from oneassist.agents.registry import build_default_registry
from oneassist.routing.router import AgentRouter


@pytest.fixture
def ga_multi_payload():
    """Two Google Analytics properties: one with traffic, one empty.

    Returns:
        camelCase payload as produced by the platform-fetch layer
    """
    return {
        "properties": [
            {
                "propertyId": "111",
                "propertyName": "Main Site",
                "realtime": {
                    "activeUsers": 12,
                    "byDevice": [
                        {"device": "mobile", "users": 8},
                        {"device": "desktop", "users": 4},
                    ],
                },
                "metrics": {
                    "sessions": 12500,
                    "users": 9800,
                    "newUsers": 7000,
                    "pageviews": 40210,
                    "bounceRate": 0.4523,
                    "avgSessionDuration": 192,
                    "engagementRate": 0.61,
                },
                "dimensions": {
                    "topSources": [
                        {"source": "google", "medium": "organic", "sessions": 6000},
                        {"source": "(direct)", "medium": "(none)", "sessions": 2500},
                        {"source": "facebook", "medium": "paid", "sessions": 1800},
                        {"source": "linkedin", "medium": "social", "sessions": 900},
                        {"source": "newsletter", "medium": "email", "sessions": 700},
                        {"source": "bing", "medium": "organic", "sessions": 600},
                    ],
                    "devices": [
                        {"device": "mobile", "sessions": 8000, "percentage": 64, "bounceRate": 0.58},
                        {"device": "desktop", "sessions": 4500, "percentage": 36, "bounceRate": 0.31},
                    ],
                    "topPages": [
                        {"page": "/", "views": 15000, "avgTime": 45},
                        {"page": "/pricing", "views": 6200, "avgTime": 130},
                    ],
                    "countries": [{"country": "India", "users": 5000}],
                    "cities": [{"city": "Mumbai", "country": "India", "users": 2100}],
                    "regions": [{"region": "Maharashtra", "users": 2600}],
                },
            },
            {
                "propertyId": "222",
                "propertyName": "Blog",
                "realtime": {"activeUsers": 0},
                "metrics": {"sessions": 0, "users": 0, "pageviews": 0},
            },
        ],
        "dateRange": "Last 30 days",
    }


@pytest.fixture
def google_ads_payload():
    """Google Ads account billed in INR with six campaigns."""
    return {
        "customers": [{"id": "123-456-7890", "name": "Acme India", "currency": "INR"}],
        "metrics": {
            "impressions": 100000,
            "clicks": 2500,
            "cost": 45000.5,
            "conversions": 50,
            "conversionValue": 150000,
            "ctr": 2.5,
            "avgCpc": 18,
            "currency": "INR",
        },
        "campaigns": [
            {"id": f"c{i}", "name": f"Search Campaign {i}", "status": "ENABLED",
             "cost": 9000 - i * 1000, "clicks": 500 - i * 50, "impressions": 20000}
            for i in range(1, 7)
        ],
        "dateRange": "Last 30 days",
    }


@pytest.fixture
def meta_payload():
    """Meta Ads account billed in EUR, with unsorted breakdowns."""
    return {
        "accounts": [{"id": "act_1", "name": "Acme Meta", "currency": "EUR"}],
        "metrics": {
            "impressions": 50000,
            "reach": 20000,
            "clicks": 900,
            "spend": 1200,
            "ctr": 1.8,
            "cpc": 1.33,
            "cpm": 24,
            "frequency": 2.5,
            "purchases": 30,
            "cost_per_purchase": 40,
            "roas": 3.25,
        },
        "campaigns": [
            {
                "id": "m1",
                "name": "Spring Sale",
                "status": "ACTIVE",
                "objective": "CONVERSIONS",
                "metrics": {"spend": 800, "impressions": 30000, "clicks": 600, "ctr": 2.0, "purchases": 25},
            },
            {
                "id": "m2",
                "name": "Retargeting",
                "status": "ACTIVE",
                "metrics": {"spend": 400, "impressions": 20000, "clicks": 300, "ctr": 1.5},
            },
        ],
        "demographics": [
            {"age": "18-24", "gender": "female", "spend": 100, "impressions": 5000, "clicks": 80},
            {"age": "25-34", "gender": "male", "spend": 500, "impressions": 21000, "clicks": 400},
        ],
        "geography": [
            {"country": "DE", "spend": 200, "impressions": 9000, "clicks": 150},
            {"country": "FR", "spend": 700, "impressions": 28000, "clicks": 520},
        ],
        "dateRange": "Last 30 days",
    }


@pytest.fixture
def linkedin_payload():
    """LinkedIn Ads account billed in GBP with one campaign group."""
    return {
        "accounts": [{"id": "li-1", "name": "Acme B2B", "currency": "GBP"}],
        "metrics": {
            "impressions": 40000,
            "clicks": 320,
            "ctr": 0.8,
            "spend": 2400,
            "cpc": 7.5,
            "engagement": {
                "totalEngagements": 900,
                "engagementRate": 2.25,
                "likes": 400,
                "comments": 50,
                "shares": 30,
                "follows": 20,
            },
            "leads": {"total": 40, "qualified": 25, "qualityRate": 62.5, "costPerLead": 60},
            "reach": {"uniqueMembers": 15000, "averageDwellTime": 4.2},
        },
        "campaignGroups": [
            {"id": "g1", "name": "Q3 Pipeline", "status": "ACTIVE",
             "spend": 2400, "impressions": 40000, "clicks": 320},
        ],
        "campaigns": [
            {"id": "lc1", "name": "CFO Webinar", "campaignGroupId": "g1",
             "spend": 1400, "impressions": 25000, "clicks": 200, "leads": 30},
            {"id": "lc2", "name": "Whitepaper", "campaignGroupId": "g1",
             "spend": 1000, "impressions": 15000, "clicks": 120, "leads": 10},
        ],
        "dateRange": "Last 30 days",
    }


@pytest.fixture
def platform_payload(ga_multi_payload, google_ads_payload, meta_payload, linkedin_payload):
    """Bundle with every platform connected."""
    return {
        "googleAnalyticsMulti": ga_multi_payload,
        "googleAds": google_ads_payload,
        "metaAds": meta_payload,
        "linkedInAds": linkedin_payload,
    }


@pytest.fixture
def client_payload():
    """Client with Google Analytics and Meta Ads connected."""
    return {
        "id": "client-1",
        "name": "Acme",
        "platforms": {
            "googleAnalytics": {"connected": True, "status": "active"},
            "googleAds": {"connected": False},
            "metaAds": {"connected": True, "status": "active"},
        },
    }


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def router(registry):
    return AgentRouter(registry)

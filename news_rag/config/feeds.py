"""Default feed list: world, Pakistan and Indian outlets plus Google News searches."""

from urllib.parse import quote


def google_news(query: str) -> str:
    """Google News RSS search URL, India/English edition."""
    return f"https://news.google.com/rss/search?q={quote(query)}&hl=en-IN&gl=IN&ceid=IN:en"


# state or union territory -> capital city
INDIAN_REGION_CAPITALS: dict[str, str] = {
    "Andhra Pradesh": "Amaravati",
    "Arunachal Pradesh": "Itanagar",
    "Assam": "Dispur",
    "Bihar": "Patna",
    "Chhattisgarh": "Raipur",
    "Goa": "Panaji",
    "Gujarat": "Gandhinagar",
    "Haryana": "Chandigarh",
    "Himachal Pradesh": "Shimla",
    "Jharkhand": "Ranchi",
    "Karnataka": "Bengaluru",
    "Kerala": "Thiruvananthapuram",
    "Madhya Pradesh": "Bhopal",
    "Maharashtra": "Mumbai",
    "Manipur": "Imphal",
    "Meghalaya": "Shillong",
    "Mizoram": "Aizawl",
    "Nagaland": "Kohima",
    "Odisha": "Bhubaneswar",
    "Punjab": "Chandigarh",
    "Rajasthan": "Jaipur",
    "Sikkim": "Gangtok",
    "Tamil Nadu": "Chennai",
    "Telangana": "Hyderabad",
    "Tripura": "Agartala",
    "Uttar Pradesh": "Lucknow",
    "Uttarakhand": "Dehradun",
    "West Bengal": "Kolkata",
    "Andaman and Nicobar Islands": "Port Blair",
    "Chandigarh": "Chandigarh",
    "Dadra and Nagar Haveli and Daman and Diu": "Daman",
    "Delhi": "New Delhi",
    "Jammu and Kashmir": "Srinagar",
    "Ladakh": "Leh",
    "Lakshadweep": "Kavaratti",
    "Puducherry": "Puducherry",
}

BUSINESS_CITIES = (
    "Mumbai",
    "Delhi",
    "Bengaluru",
    "Chennai",
    "Hyderabad",
    "Kolkata",
    "Pune",
    "Ahmedabad",
    "Gurugram",
    "Noida",
)

TECH_HUBS = ("Bengaluru", "Hyderabad", "Pune", "Chennai", "Gurugram", "Noida", "Mumbai", "Delhi")

OUTLET_FEEDS = (
    # world
    "https://rss.nytimes.com/services/xml/rss/nyt/World.xml",
    "https://feeds.bbci.co.uk/news/world/rss.xml",
    "https://www.theguardian.com/world/rss",
    "https://feeds.a.dj.com/rss/RSSWorldNews.xml",
    "https://www.aljazeera.com/xml/rss/all.xml",
    # Pakistan
    "https://www.dawn.com/feed",
    "https://www.geo.tv/rss/1/1",
    "https://tribune.com.pk/feed/rss",
    "https://www.thenews.com.pk/rss/1/1",
    # India, national
    "https://www.thehindu.com/news/national/feeder/default.rss",
    "https://indianexpress.com/section/india/feed/",
    "https://feeds.hindustantimes.com/HT-Home-Page-TopStories",
    "https://feeds.feedburner.com/ndtvnews-india-news",
    "https://timesofindia.indiatimes.com/rssfeeds/-2128936835.cms",
)


def default_feeds() -> list[str]:
    feeds = list(OUTLET_FEEDS)
    feeds += [google_news(f"{region} news") for region in INDIAN_REGION_CAPITALS]
    feeds += [
        google_news(f"{capital} {region} news")
        for region, capital in INDIAN_REGION_CAPITALS.items()
    ]
    feeds += [
        google_news(q)
        for q in (
            "global business news",
            "international markets news",
            "Pakistan business news",
            "India business news",
        )
    ]
    feeds += [google_news(f"{city} business news") for city in BUSINESS_CITIES]
    feeds += [google_news("India IT business news"), google_news("India technology business news")]
    feeds += [google_news(f"{hub} IT business news") for hub in TECH_HUBS]
    feeds += [
        google_news("India AI business news"),
        google_news("India artificial intelligence business news"),
    ]
    feeds += [google_news(f"{hub} AI business news") for hub in TECH_HUBS]
    return feeds


DEFAULT_FEEDS: tuple[str, ...] = tuple(default_feeds())

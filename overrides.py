"""Hand-curated display data for known project families.

Rules are evaluated in table order against the lowercased repo name. Every
matching rule is applied, so a later match overwrites the `always` fields of
an earlier one.
"""
from typing import Callable

from models import EnrichedRecord, FieldPatch, OverrideRule

PLACEHOLDER_DESCRIPTION = "Project details coming soon – see GitHub for more information."
DEFAULT_TAG = "Project"
DEFAULT_CATEGORY = "Data Analysis"

PREFERRED_CATEGORY_ORDER = (
    "Machine Learning",
    "Deep Learning",
    "NLP",
    "Data Analysis",
    "Finance",
    "Web Development",
)

_UNSPLASH = "https://images.unsplash.com/{}?auto=format&fit=crop&w=900&q=80"
CONTEXT_IMAGES = {
    "hotel": _UNSPLASH.format("photo-1542314831-068cd1dbfeeb"),
    "scraping": _UNSPLASH.format("photo-1518770660439-4636190af475"),
    "viz": _UNSPLASH.format("photo-1556157382-97eda2d62296"),
    "network": _UNSPLASH.format("photo-1504384308090-c894fdcc538d"),
    "loans": _UNSPLASH.format("photo-1563013544-824ae1b704d3"),
    "timeseries": _UNSPLASH.format("photo-1535320903710-d993d3d77d29"),
    "shiny": _UNSPLASH.format("photo-1523475472560-d2df97ec485c"),
    "mlr": _UNSPLASH.format("photo-1517430816045-df4b7de11d1d"),
}

_RAW = "https://raw.githubusercontent.com"


def contains_all(*words: str) -> Callable[[str], bool]:
    return lambda name: all(w in name for w in words)


def contains_any(*words: str) -> Callable[[str], bool]:
    return lambda name: any(w in name for w in words)


def _both(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda name: all(p(name) for p in predicates)


OVERRIDE_RULES: tuple[OverrideRule, ...] = (
    OverrideRule(
        key="customer-segmentation",
        matches=contains_all("customer", "segment"),
        always=FieldPatch(
            title="Customer Segmentation & RFM Analysis",
            description=(
                "Customer segmentation using RFM and KMeans clustering (with kernel PCA) to create "
                "actionable customer groups and targeted marketing strategies."
            ),
            tags=("Python", "R", "Clustering", "RFM"),
            categories=("Machine Learning", "Data Analysis"),
        ),
        fill=FieldPatch(
            image_url=f"{_RAW}/georgekalf/Customer-segmentation/main/too-broad-customer-segmentation.jpeg",
        ),
    ),
    OverrideRule(
        key="hotel-reservations",
        matches=contains_all("hotel", "reserv"),
        always=FieldPatch(
            title="Hotel Reservation Cancellation & Guest Segmentation (ML)",
            description=(
                "Explores hotel reservation data with EDA and KMeans clustering to segment guests and "
                "understand booking patterns. Trains multiple ML models to predict cancellations and "
                "compare performance."
            ),
            tags=("Python", "ML", "Clustering", "XGBoost"),
            categories=("Machine Learning", "Data Analysis"),
        ),
        fill=FieldPatch(image_url=CONTEXT_IMAGES["hotel"]),
    ),
    OverrideRule(
        key="imdb-helpful-reviews",
        matches=contains_all("imdb"),
        always=FieldPatch(
            title="IMDB Helpful Reviews Detection (NLP)",
            description=(
                "Applying NLP techniques to detect helpful reviews on IMDB using text preprocessing, "
                "feature engineering and supervised learning models."
            ),
            tags=("Python", "NLP", "Machine Learning"),
            categories=("Machine Learning", "NLP"),
            image_url=(
                f"{_RAW}/Imdb-helpful-reviews-detection-NLP/"
                "Detection-of-helpful-reviews-on-IMDB-/main/IMDBs.jpg"
            ),
        ),
    ),
    OverrideRule(
        key="fiat-500-nlp",
        matches=contains_all("fiat", "nlp"),
        always=FieldPatch(
            title="Fiat 500 EV – NLP Sentiment & Network Analysis",
            description=(
                "NLP-driven sentiment analysis and network analytics on 10k+ YouTube comments to assess "
                "public perception of the Fiat 500 electric model. Explores community structure, "
                "influencer dynamics and engagement patterns using graph-based methods."
            ),
            tags=("Python", "NLP", "Network Analysis", "APIs"),
            categories=("NLP",),
            image_url=f"{_RAW}/georgekalf/Fiat-500-NLP-NetworkAnalysis/main/electric_cars.jpeg",
        ),
    ),
    OverrideRule(
        key="ishango-challenge",
        matches=contains_all("ishango", "challenge"),
        always=FieldPatch(
            title="Ishango Data Engineering Challenge",
            description="Bigfoot Sightings Analysis: EDA, NLP & Semantic Classification.",
            tags=("Python", "SQL", "Data Engineering"),
            categories=("Data Analysis", "NLP"),
            image_url=f"{_RAW}/georgekalf/ishango-challenge/main/images/big_foot.jpg",
        ),
    ),
    OverrideRule(
        key="web-scraping",
        matches=contains_all("web", "scrap"),
        always=FieldPatch(
            title="Web Scraping Projects (NBA & Aldi Jobs)",
            description=(
                "Web scraping pipelines for NBA defensive analytics and Aldi job postings, from data "
                "collection to cleaning, feature engineering and exploratory analysis."
            ),
            tags=("Python", "Web Scraping", "APIs"),
            categories=("Data Analysis",),
            image_url=f"{_RAW}/georgekalf/web-scraping/main/web-scraping.jpeg",
        ),
    ),
    OverrideRule(
        key="data-management-mongodb",
        matches=_both(contains_all("data-management"), contains_any("mongo", "mongodb")),
        always=FieldPatch(
            title="Data Management with MongoDB & PyMongo",
            description=(
                "Data management project using MongoDB and PyMongo to store, restructure and analyse "
                "GitHub OSS data. Focuses on querying commits, authors and activity patterns."
            ),
            tags=("Python", "MongoDB", "PyMongo", "PySpark"),
            categories=("Data Analysis",),
        ),
        fill=FieldPatch(image_url=f"{_RAW}/georgekalf/data-management-mongodb/main/pymongo.jpg"),
    ),
    OverrideRule(
        key="covid-visualisation",
        matches=contains_any("covid", "visual", "data-visual"),
        always=FieldPatch(
            title="COVID-19 Impact on UK Businesses (Data Visualisation)",
            description=(
                "Visual exploration of COVID-19 impact on UK businesses from 2019–2021 using Seaborn "
                "and Plotly, with interactive and animated charts across industries."
            ),
            tags=("Python", "Seaborn", "Plotly", "Data Viz"),
            categories=("Data Analysis",),
        ),
        fill=FieldPatch(image_url=CONTEXT_IMAGES["viz"]),
    ),
    OverrideRule(
        key="machine-learning-r",
        matches=contains_all("machine", "learning", "r"),
        always=FieldPatch(
            title="Machine Learning in R (Supervised & Unsupervised)",
            description=(
                "ML exercises in R covering dimensionality reduction, clustering and classification. "
                "Includes decision trees, random forests, SVMs, kNN, LDA and cross-validation on "
                "datasets like German credit and medical data."
            ),
            tags=("R", "ML", "Clustering", "Classification"),
            categories=("Machine Learning",),
        ),
        fill=FieldPatch(image_url=CONTEXT_IMAGES["mlr"]),
    ),
    OverrideRule(
        key="network-analytics",
        matches=contains_all("network", "analytic"),
        always=FieldPatch(
            title="Network Analytics on Trading Floors & AI Adoption",
            description=(
                "Network analysis of security traders’ knowledge-sharing relationships and attitudes "
                "toward AI on a trading floor, using graph metrics and positional data."
            ),
            tags=("Python", "NetworkX", "Graph Analytics"),
            categories=("Data Analysis",),
        ),
        fill=FieldPatch(image_url=CONTEXT_IMAGES["network"]),
    ),
    OverrideRule(
        key="credit-default",
        matches=contains_any("loan", "credit", "default"),
        always=FieldPatch(
            title="Credit Default Prediction & Drivers of Risk",
            description=(
                "Credit risk modelling using bank client data with demographics, payment history and "
                "bill statements. Builds models to estimate default likelihood and identify key "
                "drivers for lending decisions."
            ),
            tags=("Python", "ML", "Risk Modelling"),
            categories=("Machine Learning", "Finance"),
        ),
        fill=FieldPatch(image_url=CONTEXT_IMAGES["loans"]),
    ),
    OverrideRule(
        key="drug-recommendation-shiny",
        matches=contains_any("shiny", "drug"),
        always=FieldPatch(
            title="Drug Recommendation App (R Shiny)",
            description=(
                "Interactive R Shiny app for drug recommendation and classification built as part of "
                "MSc work, predicting appropriate medications from patient characteristics."
            ),
            tags=("R", "Shiny", "Classification"),
            categories=("Machine Learning", "Web Development"),
        ),
        fill=FieldPatch(image_url=CONTEXT_IMAGES["shiny"]),
    ),
    OverrideRule(
        key="time-series",
        matches=contains_all("time", "series"),
        always=FieldPatch(
            title="Time Series Forecasting with RNNs & CNNs",
            description=(
                "Time series analysis framework using TensorFlow and Keras with LSTM and CNN "
                "architectures, plus preprocessing utilities and training/validation visualisations."
            ),
            tags=("Python", "TensorFlow", "Keras", "Time Series"),
            categories=("Machine Learning", "Deep Learning"),
        ),
        fill=FieldPatch(image_url=CONTEXT_IMAGES["timeseries"]),
    ),
)


# Shown when the repo listing itself fails
FALLBACK_RECORDS: tuple[EnrichedRecord, ...] = (
    EnrichedRecord(
        name="Hotel Reservations Analysis",
        title="Hotel Reservation Cancellation & Guest Segmentation (ML)",
        description=(
            "Explores hotel reservation data with EDA and KMeans clustering to segment guests and "
            "understand booking behaviour. Trains multiple ML models to predict cancellations and "
            "compare performance."
        ),
        tags=("Python", "ML", "Clustering"),
        image_url=CONTEXT_IMAGES["hotel"],
        source_url="https://github.com/georgekalf",
        categories=("Machine Learning", "Data Analysis"),
    ),
    EnrichedRecord(
        name="Time Series RNN CNN",
        title="Time Series Forecasting with RNNs & CNNs",
        description=(
            "Time series modelling framework using TensorFlow and Keras with LSTM and CNN "
            "architectures, including preprocessing utilities and training visualisations."
        ),
        tags=("Python", "TensorFlow", "Keras"),
        image_url=CONTEXT_IMAGES["timeseries"],
        source_url="https://github.com/georgekalf",
        categories=("Machine Learning", "Deep Learning"),
    ),
)

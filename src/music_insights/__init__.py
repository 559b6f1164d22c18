from music_insights.analytics.core.aggregate import aggregate, count_by
from music_insights.analytics.core.daily import keys_every_day
from music_insights.analytics.core.ranking import arg_max, top_n
from music_insights.analytics.core.streaks import longest_run
from music_insights.analytics.core.windows import is_friday_night
from music_insights.catalog.decoders import load_catalog_json
from music_insights.catalog.memory import InMemoryCatalog
from music_insights.catalog.protocol import CatalogProto
from music_insights.error_codes import MusicInsightsErrorCode
from music_insights.models import AnswerRow, ListenEvent, Question, Song, StreakResult
from music_insights.presenter import PresenterProto, StreamPresenter, present_user
from music_insights.queries import QUESTIONS, QueryCatalog, build_query_catalog

__all__ = [
    "QUESTIONS",
    "AnswerRow",
    "CatalogProto",
    "InMemoryCatalog",
    "ListenEvent",
    "MusicInsightsErrorCode",
    "PresenterProto",
    "Question",
    "QueryCatalog",
    "Song",
    "StreakResult",
    "StreamPresenter",
    "aggregate",
    "arg_max",
    "build_query_catalog",
    "count_by",
    "is_friday_night",
    "keys_every_day",
    "load_catalog_json",
    "longest_run",
    "present_user",
    "top_n",
]

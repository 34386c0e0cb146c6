"""
Demo content for development and previews.

When ``SEED_DEMO_DATA`` is enabled the application fills an empty store
with the content the public site was designed around: the league table,
a few fixtures and results, the squad, coaching staff, news, blog
posts, gallery items and the club timeline.  Every record goes through
the entity's create schema, so the demo data obeys the same rules as
data entered through the API.
"""

import logging
from typing import Dict, Iterable, Type

from pydantic import BaseModel

from club_site_api.app.core.storage import ClubStorage, Repository
from club_site_api.app.schemas.blog import BlogPostCreate
from club_site_api.app.schemas.coach import CoachCreate
from club_site_api.app.schemas.history import HistoryCreate
from club_site_api.app.schemas.match import MatchCreate
from club_site_api.app.schemas.media import MediaCreate
from club_site_api.app.schemas.news import NewsCreate
from club_site_api.app.schemas.player import PlayerCreate
from club_site_api.app.schemas.standing import StandingCreate

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w={}&q=80"

STANDINGS = [
    {"team": "Динамо", "position": 1, "played": 23, "won": 18, "drawn": 3, "lost": 2, "goals_for": 48, "goals_against": 12, "points": 57},
    {"team": "Зенит", "position": 2, "played": 23, "won": 16, "drawn": 4, "lost": 3, "goals_for": 45, "goals_against": 18, "points": 52},
    {"team": "Александрия", "position": 3, "played": 23, "won": 15, "drawn": 5, "lost": 3, "goals_for": 39, "goals_against": 21, "points": 50},
    {"team": "Спартак", "position": 4, "played": 23, "won": 13, "drawn": 5, "lost": 5, "goals_for": 36, "goals_against": 22, "points": 44},
    {"team": "ЦСКА", "position": 5, "played": 23, "won": 11, "drawn": 8, "lost": 4, "goals_for": 31, "goals_against": 19, "points": 41},
]

MATCHES = [
    {
        "date": "2023-05-15", "time": "19:30", "competition": "Кубок страны",
        "home_team": "Александрия", "away_team": "Динамо", "home_team_logo": "А", "away_team_logo": "Д",
        "stadium": "Центральный", "status": "upcoming", "round": "Полуфинал",
    },
    {
        "date": "2023-05-21", "time": "17:00", "competition": "Чемпионат",
        "home_team": "Спартак", "away_team": "Александрия", "home_team_logo": "С", "away_team_logo": "А",
        "stadium": "Спартак Арена", "status": "upcoming", "round": "Тур 24",
    },
    {
        "date": "2023-05-28", "time": "20:00", "competition": "Чемпионат",
        "home_team": "Александрия", "away_team": "Зенит", "home_team_logo": "А", "away_team_logo": "З",
        "stadium": "Центральный", "status": "upcoming", "round": "Тур 25",
    },
    {
        "date": "2023-05-07", "time": "18:00", "competition": "Чемпионат",
        "home_team": "Александрия", "away_team": "Спартак", "home_team_logo": "А", "away_team_logo": "С",
        "home_score": 2, "away_score": 0,
        "stadium": "Центральный", "status": "completed", "round": "Тур 23",
    },
]

PLAYERS = [
    {"name": "Александр Иванов", "position": "Вратарь", "number": 1, "age": 28, "matches": 21, "goals": 0, "assists": 0, "clean_sheets": 9,
     "image_url": _UNSPLASH.format("1546083381-2bed38b1a8ab", 400)},
    {"name": "Сергей Петров", "position": "Защитник", "number": 5, "age": 26, "matches": 23, "goals": 2, "assists": 1, "clean_sheets": 0,
     "image_url": _UNSPLASH.format("1633467067670-3e3c79da4d7e", 400)},
    {"name": "Николай Смирнов", "position": "Полузащитник", "number": 8, "age": 24, "matches": 22, "goals": 5, "assists": 7, "clean_sheets": 0,
     "image_url": _UNSPLASH.format("1616473644513-dfa92ceb6641", 400)},
    {"name": "Виктор Козлов", "position": "Нападающий", "number": 10, "age": 27, "matches": 23, "goals": 12, "assists": 5, "clean_sheets": 0,
     "image_url": _UNSPLASH.format("1570498839593-e565b39455fc", 400)},
    {"name": "Дмитрий Соколов", "position": "Защитник", "number": 15, "age": 25, "matches": 20, "goals": 1, "assists": 0, "clean_sheets": 0,
     "image_url": _UNSPLASH.format("1624059560699-74531a47c49b", 400)},
]

COACHES = [
    {"name": "Андрей Шевченко", "position": "Главный тренер", "join_year": 2021, "achievements": "Кубок 2022",
     "image_url": _UNSPLASH.format("1531891570158-e71b35a485bc", 300)},
    {"name": "Игорь Белов", "position": "Ассистент", "join_year": 2021, "achievements": "Специализация: Защита",
     "image_url": _UNSPLASH.format("1566753323558-f4e0952af115", 300)},
    {"name": "Павел Черных", "position": "Тренер вратарей", "join_year": 2020, "achievements": "Бывший вратарь сборной",
     "image_url": _UNSPLASH.format("1552058544-f2b08422138a", 300)},
]

NEWS = [
    {"title": "Важная победа команды в матче против лидера чемпионата",
     "content": "Подробный отчет о матче и анализ ключевых моментов игры.",
     "excerpt": "Команда одержала важную победу в матче против лидера чемпионата.",
     "image_url": _UNSPLASH.format("1518091043644-c1d4457512c6", 800),
     "category": "Матч", "date": "2023-05-10", "views": 1200, "comments": 24},
    {"title": "Клуб подписал нового талантливого нападающего",
     "content": "Информация о новом игроке, его карьере и ожиданиях от выступлений за клуб.",
     "excerpt": "Новый нападающий присоединился к команде.",
     "image_url": _UNSPLASH.format("1520473378652-85d9c4aee6cf", 400),
     "category": "Трансфер", "date": "2023-05-08", "views": 980, "comments": 15},
    {"title": "Интервью главного тренера о планах на сезон",
     "content": "Главный тренер делится своими мыслями о текущем сезоне и планах на будущее.",
     "excerpt": "Главный тренер рассказал о планах команды на остаток сезона.",
     "image_url": _UNSPLASH.format("1579710758949-3ab56a3b3114", 400),
     "category": "Интервью", "date": "2023-05-05", "views": 750, "comments": 8},
    {"title": "Тренировка команды перед важным матчем кубка",
     "content": "Отчет о подготовке команды к предстоящему полуфиналу кубка страны.",
     "excerpt": "Команда активно готовится к предстоящему полуфиналу кубка страны.",
     "image_url": _UNSPLASH.format("1547247865-5732fd2c351b", 400),
     "category": "Тренировка", "date": "2023-05-08", "views": 342, "comments": 4},
    {"title": "Открытая тренировка для болельщиков клуба",
     "content": "Информация о предстоящей открытой тренировке для болельщиков.",
     "excerpt": "В эту субботу состоится открытая тренировка для болельщиков.",
     "image_url": _UNSPLASH.format("1579952363873-27f3bade9f55", 400),
     "category": "Событие", "date": "2023-05-06", "views": 518, "comments": 7},
    {"title": "Новая домашняя форма на следующий сезон",
     "content": "Презентация новой домашней формы команды на следующий сезон.",
     "excerpt": "Клуб представил новую домашнюю форму на следующий сезон.",
     "image_url": _UNSPLASH.format("1622459032479-afd05e326472", 400),
     "category": "Клуб", "date": "2023-05-05", "views": 476, "comments": 9},
]

BLOG_POSTS = [
    {"title": "Анализ тактики: как мы перестроили игру в середине сезона",
     "content": "Подробный разбор тактических изменений, которые помогли команде улучшить результаты.",
     "excerpt": "Разбор тактических изменений второй половины чемпионата.",
     "author_id": 1, "author_name": "Андрей Шевченко",
     "author_avatar": _UNSPLASH.format("1531891570158-e71b35a485bc", 40),
     "date": "2023-05-03", "image_url": _UNSPLASH.format("1626248801379-51a0748a5f96", 600),
     "views": 1200, "comments": 8},
    {"title": "Оборонительные схемы современного футбола",
     "content": "Анализ эволюции оборонительных схем в современном футболе.",
     "excerpt": "Как эволюционировали оборонительные схемы и какие из них используем мы.",
     "author_id": 2, "author_name": "Игорь Белов",
     "author_avatar": _UNSPLASH.format("1566753323558-f4e0952af115", 40),
     "date": "2023-04-28", "image_url": _UNSPLASH.format("1461896836934-ffe607ba8211", 600),
     "views": 985, "comments": 5},
    {"title": "Работа с молодыми вратарями: секреты подготовки",
     "content": "Методика работы с молодыми талантливыми вратарями.",
     "excerpt": "Опыт работы с молодыми вратарями и методика их подготовки.",
     "author_id": 3, "author_name": "Павел Черных",
     "author_avatar": _UNSPLASH.format("1552058544-f2b08422138a", 40),
     "date": "2023-04-25", "image_url": _UNSPLASH.format("1624526267942-ab0c0e53d0e3", 600),
     "views": 764, "comments": 3},
]

MEDIA = [
    {"type": "photo", "title": "Фото матча", "url": _UNSPLASH.format("1543326727-cf6c39e8f84c", 500), "category": "Матчи", "date": "2023-05-07"},
    {"type": "photo", "title": "Фото матча", "url": _UNSPLASH.format("1587329310686-91414b8e3cb7", 500), "category": "Матчи", "date": "2023-05-07"},
    {"type": "photo", "title": "Тренировка команды", "url": _UNSPLASH.format("1599058917765-a780eda07a3e", 500), "category": "Тренировки", "date": "2023-05-04"},
    {"type": "photo", "title": "Стадион", "url": _UNSPLASH.format("1577223625816-6599880d5e2a", 500), "category": "Стадион", "date": "2023-05-01"},
    {"type": "photo", "title": "Празднование гола", "url": _UNSPLASH.format("1574629810360-7efbbe195018", 500), "category": "Матчи", "date": "2023-05-07"},
    {"type": "photo", "title": "Болельщики", "url": _UNSPLASH.format("1579952363873-27f3bade9f55", 500), "category": "Болельщики", "date": "2023-05-07"},
    {"type": "photo", "title": "Интервью", "url": _UNSPLASH.format("1577223625816-6599880d5e2a", 500), "category": "Интервью", "date": "2023-05-08"},
    {"type": "photo", "title": "Командное фото", "url": _UNSPLASH.format("1517466787929-bc90951d0974", 500), "category": "Команда", "date": "2023-05-02"},
    {"type": "video", "title": "Обзор матча: Александрия 2:0 Динамо", "url": "https://example.com/video1",
     "thumbnail_url": _UNSPLASH.format("1542673211-9cf58c7e018c", 600), "category": "Обзоры",
     "date": "2023-05-07", "duration": "12:34", "views": 8500},
    {"type": "video", "title": "Интервью с Виктором Козловым после матча", "url": "https://example.com/video2",
     "thumbnail_url": _UNSPLASH.format("1511886929837-354d1301068d", 600), "category": "Интервью",
     "date": "2023-05-07", "duration": "5:47", "views": 4200},
    {"type": "video", "title": "Топ-10 голов команды в текущем сезоне", "url": "https://example.com/video3",
     "thumbnail_url": _UNSPLASH.format("1560272564-c83b66b1ad12", 600), "category": "Голы",
     "date": "2023-05-05", "duration": "8:21", "views": 12300},
]

HISTORY = [
    {"year": 1995, "title": "Основание клуба", "importance": 3,
     "description": "ФК «Александрия» был основан группой энтузиастов и любителей футбола.",
     "image_url": _UNSPLASH.format("1562552476-8ac59b2a2e46", 800)},
    {"year": 2001, "title": "Первый трофей", "importance": 2,
     "description": "Клуб выиграл свой первый трофей - Кубок области.",
     "image_url": _UNSPLASH.format("1522778526097-ce0a22ceb253", 800)},
    {"year": 2008, "title": "Выход в высший дивизион", "importance": 3,
     "description": "После нескольких лет борьбы в низших лигах клуб добился права выступать в высшем дивизионе.",
     "image_url": _UNSPLASH.format("1521537634581-0dced2fee2ef", 800)},
    {"year": 2012, "title": "Открытие новой тренировочной базы", "importance": 2,
     "description": "Открытие современной тренировочной базы с несколькими полями и спортивным комплексом.",
     "image_url": _UNSPLASH.format("1518604666860-9ed391f76460", 800)},
    {"year": 2015, "title": "Первое участие в еврокубках", "importance": 3,
     "description": "ФК «Александрия» впервые принял участие в европейских турнирах.",
     "image_url": _UNSPLASH.format("1518091043644-c1d4457512c6", 800)},
    {"year": 2019, "title": "Бронзовые медали чемпионата", "importance": 2,
     "description": "Клуб завоевал бронзовые медали чемпионата, показав лучший результат в своей истории.",
     "image_url": _UNSPLASH.format("1552667466-07770ae110d0", 800)},
    {"year": 2022, "title": "Победа в Кубке страны", "importance": 3,
     "description": "Историческая победа в финале Кубка страны над принципиальным соперником со счетом 2:1.",
     "image_url": _UNSPLASH.format("1596778402543-47042ab4592f", 800)},
]


def _load(repository: Repository, schema: Type[BaseModel], rows: Iterable[Dict]) -> int:
    count = 0
    for row in rows:
        repository.create(schema.model_validate(row).model_dump())
        count += 1
    return count


def seed_demo_data(storage: ClubStorage) -> Dict[str, int]:
    """Fill ``storage`` with demo content and return the number of rows per entity.

    Entities that already hold records are skipped, so calling this on a
    populated store does not duplicate anything.
    """
    plan = [
        ("standings", storage.standings, StandingCreate, STANDINGS),
        ("matches", storage.matches, MatchCreate, MATCHES),
        ("players", storage.players, PlayerCreate, PLAYERS),
        ("coaches", storage.coaches, CoachCreate, COACHES),
        ("news", storage.news, NewsCreate, NEWS),
        ("blog_posts", storage.blog_posts, BlogPostCreate, BLOG_POSTS),
        ("media", storage.media, MediaCreate, MEDIA),
        ("history", storage.history, HistoryCreate, HISTORY),
    ]
    loaded: Dict[str, int] = {}
    for name, repository, schema, rows in plan:
        if len(repository):
            logger.debug("Skipping %s seed, repository not empty", name)
            continue
        loaded[name] = _load(repository, schema, rows)
    logger.info("Demo data loaded: %s", ", ".join(f"{k}={v}" for k, v in loaded.items()) or "nothing")
    return loaded

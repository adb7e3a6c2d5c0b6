"""Persisted entities and the whole-state document.

Everything the service knows lives in one ``AppState`` instance, serialized
as a single JSON document with one top-level array per entity type.
Entities are mutated in place; nothing is hard-deleted.
"""

import datetime as dt

from pydantic import Field

from imara.db.base import CamelModel, new_id, utcnow

# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class Streak(CamelModel):
    current: int = 0
    longest: int = 0
    last_check_in_date: dt.date | None = None


class UserStats(CamelModel):
    total_check_ins: int = 0
    total_journal_entries: int = 0
    total_habits_completed: int = 0
    total_mood_entries: int = 0
    total_points: int = 0
    achievements_count: int = 0


class UserSettings(CamelModel):
    notifications: bool = True
    email_notifications: bool = False
    theme: str = "light"
    accent_color: str = "amber"
    daily_reminder_time: str = "09:00"


class User(CamelModel):
    id: str = Field(default_factory=new_id)
    email: str
    username: str
    name: str
    password_hash: str
    avatar: str | None = None
    bio: str = ""
    streak: Streak = Field(default_factory=Streak)
    stats: UserStats = Field(default_factory=UserStats)
    settings: UserSettings = Field(default_factory=UserSettings)
    created_at: dt.datetime = Field(default_factory=utcnow)
    last_active: dt.datetime = Field(default_factory=utcnow)


# ---------------------------------------------------------------------------
# Tracking records
# ---------------------------------------------------------------------------


class CheckIn(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    date: dt.date
    sleep: str
    food: str
    focus: str
    mood: str
    notes: str = ""
    tags: list[str] = Field(default_factory=list)
    created_at: dt.datetime = Field(default_factory=utcnow)


class JournalEntry(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    content: str
    mood: str = ""
    tags: list[str] = Field(default_factory=list)
    prompt: str = ""
    date: dt.date
    created_at: dt.datetime = Field(default_factory=utcnow)
    word_count: int = 0


class Habit(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    name: str
    emoji: str = "✨"
    category: str = "health"
    frequency: str = "daily"
    reminder_time: str | None = None
    current_streak: int = 0
    longest_streak: int = 0
    total_completions: int = 0
    is_active: bool = True
    created_at: dt.datetime = Field(default_factory=utcnow)


class HabitCompletion(CamelModel):
    """At most one per (habit_id, date); toggled, never appended twice."""

    id: str = Field(default_factory=new_id)
    habit_id: str
    user_id: str
    date: dt.date
    completed: bool = True
    created_at: dt.datetime = Field(default_factory=utcnow)


class MoodEntry(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    mood: str
    intensity: int = 5
    notes: str = ""
    triggers: list[str] = Field(default_factory=list)
    date: dt.date
    created_at: dt.datetime = Field(default_factory=utcnow)


# ---------------------------------------------------------------------------
# Gamification
# ---------------------------------------------------------------------------


class Achievement(CamelModel):
    """Static catalog entry."""

    id: str
    title: str
    description: str
    icon: str = ""
    points: int
    category: str
    color: str = ""


class UserAchievement(CamelModel):
    """Grant record. Unique per (user_id, achievement_id)."""

    id: str = Field(default_factory=new_id)
    user_id: str
    achievement_id: str
    unlocked_at: dt.datetime = Field(default_factory=utcnow)
    progress: int = 100
    is_unlocked: bool = True


class Challenge(CamelModel):
    id: str
    title: str
    description: str
    category: str
    duration: int
    points: int
    icon: str = ""
    color: str = ""
    is_active: bool = True


class UserChallenge(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    challenge_id: str
    joined_at: dt.datetime = Field(default_factory=utcnow)
    progress: int = 0
    is_completed: bool = False
    streak: int = 0
    check_ins: list[dt.date] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------


class SelfCareActivity(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    title: str
    description: str = ""
    category: str = "selfcare"
    day_of_week: int
    time: str
    duration: int = 15
    is_recurring: bool = True
    is_active: bool = True
    priority: int = 2
    color: str = "blue"
    icon: str = "❤️"
    completions: list[dt.date] = Field(default_factory=list)
    created_at: dt.datetime = Field(default_factory=utcnow)


class Reminder(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    title: str
    message: str
    type: str = "custom"
    time: str
    days_of_week: list[int] = Field(default_factory=lambda: [0, 1, 2, 3, 4, 5, 6])
    is_active: bool = True
    created_at: dt.datetime = Field(default_factory=utcnow)


# ---------------------------------------------------------------------------
# Community
# ---------------------------------------------------------------------------


class CommunityPost(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    content: str
    author_name: str
    is_anonymous: bool = True
    likes: list[str] = Field(default_factory=list)  # user ids, no duplicates
    reply_count: int = 0
    created_at: dt.datetime = Field(default_factory=utcnow)
    updated_at: dt.datetime = Field(default_factory=utcnow)


class PostReply(CamelModel):
    id: str = Field(default_factory=new_id)
    post_id: str
    user_id: str
    content: str
    author_name: str
    is_anonymous: bool = True
    created_at: dt.datetime = Field(default_factory=utcnow)


# ---------------------------------------------------------------------------
# Appearance
# ---------------------------------------------------------------------------


class Theme(CamelModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    theme: str = "light"
    accent_color: str = "amber"
    font_size: str = "medium"
    reduced_motion: bool = False
    last_updated: dt.datetime = Field(default_factory=utcnow)


# ---------------------------------------------------------------------------
# Whole-state document
# ---------------------------------------------------------------------------


class AppState(CamelModel):
    users: list[User] = Field(default_factory=list)
    checkins: list[CheckIn] = Field(default_factory=list)
    journals: list[JournalEntry] = Field(default_factory=list)
    habits: list[Habit] = Field(default_factory=list)
    habit_completions: list[HabitCompletion] = Field(default_factory=list)
    mood_entries: list[MoodEntry] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    user_achievements: list[UserAchievement] = Field(default_factory=list)
    self_care_activities: list[SelfCareActivity] = Field(default_factory=list)
    challenges: list[Challenge] = Field(default_factory=list)
    user_challenges: list[UserChallenge] = Field(default_factory=list)
    reminders: list[Reminder] = Field(default_factory=list)
    community_posts: list[CommunityPost] = Field(default_factory=list)
    post_replies: list[PostReply] = Field(default_factory=list)
    themes: list[Theme] = Field(default_factory=list)
    last_save: dt.datetime | None = None

    def find_user(self, user_id: str) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

from enum import Enum


class PostCategory(str, Enum):
    history = "History"
    science = "Science"
    technology = "Technology"
    art = "Art"
    music = "Music"
    sports = "Sports"
    other = "Other"

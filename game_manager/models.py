from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class Game:
    id: str
    title: str
    description: str
    genre: str
    platform: str
    rating: float
    release_date: str
    image_url: str
    is_favorite: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Game':
        return cls(
            id=str(data['id']),
            title=data['title'],
            description=data['description'],
            genre=data['genre'],
            platform=data['platform'],
            rating=data['rating'],
            release_date=data['releaseDate'],
            image_url=data['imageUrl'],
            is_favorite=bool(data.get('isFavorite', False)),
        )

    def apply(self, data: Dict[str, Any]) -> None:
        """Overwrite the editable fields from a validated payload.

        ``id`` and ``is_favorite`` are never touched here.
        """
        self.title = data['title']
        self.description = data['description']
        self.genre = data['genre']
        self.platform = data['platform']
        self.rating = data['rating']
        self.release_date = data['releaseDate']
        self.image_url = data['imageUrl']

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'genre': self.genre,
            'platform': self.platform,
            'rating': self.rating,
            'releaseDate': self.release_date,
            'imageUrl': self.image_url,
            'isFavorite': self.is_favorite,
        }


SEED_GAMES: List[Dict[str, Any]] = [
    {
        'id': '1',
        'title': 'The Legend of Zelda: Breath of the Wild',
        'description': 'Open-world adventure game',
        'genre': 'Action-Adventure',
        'platform': 'Nintendo Switch',
        'rating': 9.5,
        'releaseDate': '2017-03-03T00:00:00Z',
        'imageUrl': 'https://upload.wikimedia.org/wikipedia/en/c/c6/The_Legend_of_Zelda_Breath_of_the_Wild.jpg',
        'isFavorite': True,
    },
    {
        'id': '2',
        'title': 'Cyberpunk 2077',
        'description': 'Futuristic RPG',
        'genre': 'RPG',
        'platform': 'PC',
        'rating': 8.0,
        'releaseDate': '2020-12-10T00:00:00Z',
        'imageUrl': 'https://upload.wikimedia.org/wikipedia/en/9/9f/Cyberpunk_2077_box_art.jpg',
        'isFavorite': False,
    },
]

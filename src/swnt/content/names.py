"""
Culture-specific name tables.

Each culture carries four uniform lists: male and female given names,
surnames and place names. Worlds take a place name, NPCs a given name
and a surname.
"""

from dataclasses import dataclass
from typing import Optional

from swnt.content.culture import Culture
from swnt.data_models import DiceRoller, get_dice_roller
from swnt.tables.table_types import UniformList


@dataclass
class NameSet:
    """The name lists for one culture."""
    culture: Culture
    male: UniformList
    female: UniformList
    surname: UniformList
    place: UniformList

    def full_name(self, dice: Optional[DiceRoller] = None) -> str:
        """A given name of either list followed by a surname."""
        dice = dice or get_dice_roller()
        given = self.male if dice.randint(1, 2, "name gender") == 1 else self.female
        return f"{given.roll(dice)} {self.surname.roll(dice)}"


def _name_set(culture: Culture, male: list[str], female: list[str],
              surname: list[str], place: list[str]) -> NameSet:
    return NameSet(
        culture=culture,
        male=UniformList(f"{culture.value} Male", male),
        female=UniformList(f"{culture.value} Female", female),
        surname=UniformList(f"{culture.value} Surname", surname),
        place=UniformList(f"{culture.value} Place", place),
    )


# =============================================================================
# NAME TABLES
# =============================================================================


NAMES: dict[Culture, NameSet] = {
    Culture.ARABIC: _name_set(
        Culture.ARABIC,
        male=["Aamir", "Bilal", "Farid", "Hakim", "Karim", "Nasir", "Rashid", "Tariq"],
        female=["Amira", "Dalia", "Farah", "Hana", "Layla", "Nadia", "Rania", "Samira"],
        surname=["Al-Amin", "Al-Hadi", "Al-Nasser", "Haddad", "Karam", "Mansour", "Saleh", "Yousef"],
        place=["Ain Zahra", "Bab al-Nur", "Dar Salim", "Jabal Qamar", "Qasr Hilal", "Wadi Sahar"],
    ),
    Culture.CHINESE: _name_set(
        Culture.CHINESE,
        male=["Bo", "Chen", "Guang", "Jian", "Lei", "Ming", "Wei", "Zhong"],
        female=["Fang", "Hua", "Jing", "Lan", "Mei", "Ning", "Xiu", "Yan"],
        surname=["Chen", "Gao", "Huang", "Li", "Liu", "Wang", "Zhang", "Zhou"],
        place=["Baiyun", "Changle", "Jinshan", "Longmen", "Qinghai", "Tianhe"],
    ),
    Culture.ENGLISH: _name_set(
        Culture.ENGLISH,
        male=["Arthur", "Edmund", "George", "Henry", "Oliver", "Robert", "Thomas", "William"],
        female=["Alice", "Beatrice", "Charlotte", "Eleanor", "Grace", "Harriet", "Mary", "Rose"],
        surname=["Ashdown", "Blackwood", "Carter", "Fletcher", "Hale", "Marsh", "Thorne", "Whitby"],
        place=["Ashford", "Bramwell", "Greyhaven", "Kingsreach", "Northmoor", "Wexley"],
    ),
    Culture.GREEK: _name_set(
        Culture.GREEK,
        male=["Alexios", "Demetrios", "Georgios", "Kostas", "Leonidas", "Nikos", "Stavros", "Theodoros"],
        female=["Athena", "Daphne", "Eleni", "Irene", "Kalliope", "Sophia", "Thalia", "Zoe"],
        surname=["Andreou", "Dimitriou", "Galanis", "Kostopoulos", "Nikolaidis", "Papadakis"],
        place=["Akropolis Nova", "Delphoi", "Kallisto", "Nea Ithaki", "Thera Prime", "Zephyria"],
    ),
    Culture.INDIAN: _name_set(
        Culture.INDIAN,
        male=["Arjun", "Dev", "Karan", "Nikhil", "Rahul", "Sanjay", "Vijay", "Vikram"],
        female=["Ananya", "Deepa", "Kavya", "Lakshmi", "Meera", "Priya", "Radha", "Sita"],
        surname=["Bhat", "Chopra", "Iyer", "Kapoor", "Menon", "Nair", "Patel", "Rao"],
        place=["Chandrapur", "Devagiri", "Indraprastha", "Suryanagar", "Tarapur", "Vijayanagar"],
    ),
    Culture.JAPANESE: _name_set(
        Culture.JAPANESE,
        male=["Akira", "Daisuke", "Haruto", "Hiroshi", "Kenji", "Ren", "Takeshi", "Yuto"],
        female=["Aiko", "Emi", "Hana", "Keiko", "Mai", "Naomi", "Sakura", "Yui"],
        surname=["Fujita", "Ishikawa", "Kato", "Mori", "Nakamura", "Sato", "Suzuki", "Tanaka"],
        place=["Akegawa", "Hoshimura", "Kazeyama", "Shirakawa", "Tsukiji", "Yukihama"],
    ),
    Culture.LATIN: _name_set(
        Culture.LATIN,
        male=["Aurelius", "Cassius", "Felix", "Gaius", "Lucius", "Marcus", "Quintus", "Titus"],
        female=["Aurelia", "Cornelia", "Flavia", "Julia", "Livia", "Octavia", "Valeria", "Vita"],
        surname=["Aquila", "Corvus", "Drusus", "Maximus", "Severus", "Varro"],
        place=["Aurora Magna", "Castra Nova", "Fortuna", "Nova Roma", "Portus Stellae", "Vesperia"],
    ),
    Culture.NIGERIAN: _name_set(
        Culture.NIGERIAN,
        male=["Adebayo", "Chidi", "Emeka", "Femi", "Ikenna", "Kunle", "Obinna", "Tunde"],
        female=["Adaeze", "Chioma", "Folake", "Ifeoma", "Kemi", "Ngozi", "Nkechi", "Yetunde"],
        surname=["Adeyemi", "Balogun", "Eze", "Nwosu", "Okafor", "Okonkwo", "Oyelaran"],
        place=["Abeokuta Station", "Enugu Deep", "Ile-Oorun", "Ogbomosho", "Oyo Ascendant"],
    ),
    Culture.RUSSIAN: _name_set(
        Culture.RUSSIAN,
        male=["Alexei", "Boris", "Dmitri", "Ivan", "Mikhail", "Nikolai", "Sergei", "Yuri"],
        female=["Anastasia", "Irina", "Katya", "Ludmila", "Natalia", "Olga", "Svetlana", "Tatiana"],
        surname=["Ivanov", "Kuznetsov", "Morozov", "Orlov", "Petrov", "Sokolov", "Volkov"],
        place=["Novaya Zvezda", "Krasnograd", "Severomorsk", "Belaya Reka", "Zarya"],
    ),
    Culture.SPANISH: _name_set(
        Culture.SPANISH,
        male=["Alejandro", "Carlos", "Diego", "Javier", "Luis", "Mateo", "Rafael", "Santiago"],
        female=["Ana", "Carmen", "Elena", "Isabel", "Lucia", "Marisol", "Rosa", "Valentina"],
        surname=["Castillo", "Delgado", "Flores", "Herrera", "Morales", "Navarro", "Ortega", "Vega"],
        place=["Alta Esperanza", "Costa Dorada", "Nueva Sevilla", "San Cristobal", "Valle Claro"],
    ),
}


def by_culture(culture: Culture) -> NameSet:
    """The name tables for a culture."""
    return NAMES[culture]

"""
Word and syllable pools for memorable passwords.
"""

import itertools
from typing import Tuple

WORDS: Tuple[str, ...] = tuple("""
able acid acre actor adult agent alarm album alert alien alley alpha amber
angel angle ankle apple april apron arena armor arrow ashen atlas attic audio
autumn avenue award bacon badge bagel baker bamboo banjo barn basin basket
beach beacon beard beaver berry bicycle bishop blade blanket blaze blossom
board bonus border bottle bracket branch brave bread breeze brick bridge
bronze brook brush bucket buffalo bundle burrow butter cabin cable cactus
camel camera canal candle canoe canvas canyon carbon cargo carpet castle
cattle cedar cellar cement cherry chess chimney circle citrus clay cliff
clock cloud clover coast cobalt cocoa coffee comet copper coral cotton
cougar cradle crane crater crayon creek cricket crystal cupboard curtain
cushion daisy dancer dawn delta denim desert diamond dinner dolphin domino
donkey dragon drawer dream drift drum eagle earth easel echo eclipse elbow
ember emerald engine falcon feather fence ferry fiddle field flame flannel
flint forest fossil fountain fox frost galaxy garden garlic gazelle geyser
ginger glacier glove goblet granite grape gravel grove guitar hammer harbor
harvest hazel helmet heron hickory hollow honey horizon hornet island ivory
jacket jaguar jasmine jelly jigsaw jungle kayak kettle kitten koala ladder
lagoon lantern laurel lemon lilac linen lizard lobster locket lotus lumber
magnet mango maple marble meadow melon meteor mirror mitten monsoon mosaic
mountain muffin mustard napkin nectar needle nickel nomad nutmeg oasis ocean
olive onion orbit orchard otter oyster paddle palace panda panther paper
parade parrot pastel peach pebble pelican pepper piano pickle pigeon pillow
pilot pine planet plaza plum pocket pollen pony poppy potato prairie prism
puffin pumpkin puzzle quartz quill rabbit radar radish raven reef ribbon
river robin rocket rubber saddle saffron salmon sandal satin scarf school
season shadow shell shovel silver sketch sleet slipper socket spark sparrow
spider spruce squash squirrel stable stone storm stream sugar summit sunset
swan tablet talon tango teapot temple thistle thunder ticket tiger timber
toast tomato topaz torch tower trail tulip tundra turtle umbrella valley
velvet violet volcano wagon walnut walrus wander willow window winter wizard
wolf yarn yellow yogurt zebra zephyr zigzag
""".split())

_ONSETS = ("b", "c", "d", "f", "g", "h", "j", "k", "l", "m", "n", "p", "r",
           "s", "t", "v", "w", "z", "br", "ch", "dr", "fl", "gr", "sh", "st",
           "th", "tr")
_VOWELS = ("a", "e", "i", "o", "u")
_CODAS = ("", "n", "r", "s", "l", "m")

SYLLABLES: Tuple[str, ...] = tuple(
    onset + vowel + coda
    for onset, vowel, coda in itertools.product(_ONSETS, _VOWELS, _CODAS)
)

COMMON_PASSWORDS = frozenset({
    "123456", "123456789", "12345678", "12345", "1234567", "1234567890",
    "123123", "111111", "000000", "654321", "666666", "121212", "112233",
    "password", "password1", "password123", "passw0rd", "p@ssw0rd",
    "qwerty", "qwerty123", "qwertyuiop", "1q2w3e4r", "1qaz2wsx", "zaq12wsx",
    "asdfgh", "asdfghjkl", "zxcvbnm", "abc123", "abcd1234", "abcdef",
    "iloveyou", "letmein", "welcome", "welcome1", "admin", "admin123",
    "root", "toor", "login", "master", "monkey", "dragon", "football",
    "baseball", "sunshine", "princess", "shadow", "superman", "batman",
    "trustno1", "starwars", "whatever", "freedom", "hello", "charlie",
    "michael", "jennifer", "jordan", "hunter", "ranger", "buster", "soccer",
    "hockey", "killer", "george", "andrew", "thomas", "matrix", "secret",
    "access", "flower", "cookie", "pepper", "ginger", "summer", "winter",
    "changeme", "default", "guest", "test", "test123", "pass", "pass123",
    "mustang", "harley", "ninja", "azerty", "loveme", "lovely", "qazwsx",
    "solo", "computer", "internet", "samsung", "google", "zaq1zaq1",
})

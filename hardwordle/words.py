"""The word list used both for answers and for validating guesses."""

from __future__ import annotations

import random

ANSWERS: tuple[str, ...] = tuple(
    """
    about above abuse actor acute admit adult after again agent
    agree ahead alarm album alert alike alive alley allow alone
    along alter angel anger angle angry ankle apple apply arena
    argue arise armor aroma array aside asset atlas attic avoid
    awake award aware awful basic beach beard beast began being
    below bench birth black blade blame blast blaze bleed blend
    bless blind block blood bloom blown blues blunt board bonus
    boost booth bound boxer brain brave bread break breed brick
    bride brief bring broad broke broom brown brush build built
    burst buyer cable candy carry catch cause chain chair chaos
    chase cheap check cheek chess chest chief child chose civil
    claim class clean clear clerk click cliff climb clock clone
    close cloth cloud coach coast comet comic coral count court
    cover craft crane crash cream crime crisp cross crowd crown
    cruel crush curve cycle dance death delta dense depth devil
    digit dirty dizzy dodge doubt dough draft drain drama drawn
    dream dress drink drive drove drums drunk dying eagle early
    earth eight elite empty enemy enjoy enter entry equal error
    essay event exact exist extra fable falls false fancy fatal
    favor feast fence fever final first fixed flame flash fleet
    flesh float flood floor flour focus force forge forum found
    frame fresh front frost funny fuzzy giant given glass globe
    gloom glove going grace grade grain grand grant grape grasp
    grass grave great green grill grind gross grown guard guess
    guide guilt habit happy harsh heart heavy herbs hinge hotel
    house human hurry ideal image imply index inner input irony
    ivory jewel joker joint juice juicy jumbo jumpy knife kneel
    known label labor large laser later laugh layer learn lease
    legal lemon level light limit liver lodge logic loose lower
    lucky lusty magic major maker maple march marsh match mayor
    media mercy merge merit metal might minor minus mirth model
    money month moose moral motor mount mouse mouth muddy music
    musty naive ninja noble noise north novel ocean often olive
    opera orbit order other outer oxide paint panic paper party
    pasta patch pause peace peach pearl penny perch piano piece
    pilot pinch pizza place plain plane plant plead pluck plumb
    plume plush point porch power press price pride prime prior
    prize probe prone prose proud prove pulse pupil purse queen
    quest queue quick quiet quota quote radar raise ranch range
    rapid raven reach react relay repay rider ridge rifle right
    risky rival river rocky rough round route royal ruler rusty
    sadly saint sandy sauce savvy scale scene scope score scout
    screw seize sense serum serve setup seven shard share shark
    sharp sheer shelf shell shift shirt shock shore short shout
    sight silly since sixth sixty skill skull slash slave sleep
    slice slide slope smart smell smile smoke snack snake solar
    solid solve sorry south space spare spark speak spell spend
    spice spine spoke spoon sport spray stack staff stage stain
    stale stalk stand stark start state steak steel steep steer
    stern stick stiff still stock stone stood store storm story
    stout strap straw stray stuck study stuff stunt style sugar
    suite super surge sword swamp swear sweet swept swift swirl
    table talon tango taste tasty taunt tense theft theme there
    these third thorn those three thumb tiger tired title toast
    today token total touch tough tower toxic track trade trail
    train trait trash treat tribe trick troop trout truce truck
    truly trunk trust truth tulip twice twist ultra uncle under
    union unity until upper upset urban usual utter vague valid
    value valve vapor vault verse vigor viper viral virus visor
    vista vital vivid vocal voice voter vowel wager waste watch
    water weary wedge weird whale wheat wheel where which while
    white whole whose woman women world worry worst worth would
    wound wrath wrist wrong yacht yearn yield young youth zesty
    """.split()
)

VALID_WORDS: frozenset[str] = frozenset(ANSWERS)


def is_valid_word(word: str) -> bool:
    """Return True if the word is in the accepted word list."""
    return word in VALID_WORDS


def choose_target(rng: random.Random | None = None) -> str:
    """Pick a random answer, using the given random generator if any."""
    return (rng or random.Random()).choice(ANSWERS)
"""Authored level layouts.

Rows use the renderer glyphs, one character per tile:
``' '`` tunnel, ``=`` wall, ``R`` hero, ``o`` rock, ``*`` diamond, ``~`` ground,
``#`` metal, ``@`` box, ``>`` door, ``%`` fly.
Every level must be closed by a wall or metal border.
"""

from __future__ import annotations

from boulder.common.models import LevelDefinition

LEVELS: list[LevelDefinition] = [
    LevelDefinition(
        name="Intro",
        diamonds=12,
        time=150,
        rows=[
            "############################################",
            "#R~~~~~~~o~~~~*~~~~~~~~~o~~~~~~~~~*~~~~~~~~#",
            "#~~~~o~~~~~~~~~~~~o~~~~~~~~~~*~~~~~~~~o~~~~#",
            "#~~*~~~~~~~o~~~~~~~~~~~~~o~~~~~~~~~~~~~~*~~#",
            "#~~~~~~~~~~~~~~~~*~~~~~~~~~~~~~~o~~~~~~~~~~#",
            "#=====================~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~o~~~*~~~~~~~~~~~=~~~o~~~~~~*~~~~~~o~~~#",
            "#~~~~~~~~~~~~o~~~~~~~=~~~~~~~~~~~~~~~~~~~~~#",
            "#~~*~~~~~~~~~~~~~~o~~=~~~~~*~~~~~~~o~~~~~~~#",
            "#~~~~~~o~~~~~~*~~~~~~=~~~~~~~~~~~~~~~~~*~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~o~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~======================~~~~~~~~#",
            "#~~o~~~~*~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~o~~~#",
            "#~~~~~~~~~~~~~~~~~o~~~~~~~*~~~~~~~~~~~~~~~~#",
            "#~~~~~*~~~~~~~~~~~~~~~~~~~~~~~~o~~~~~*~~~~~#",
            "#~~~~~~~~~o~~~~~~~~~=        =~~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~*~~~=   @    =~~~~~~o~~~~~~#",
            "#~~o~~~~~~~~~~~~~~~~=        =~~~~~~~~~~~~~#",
            "#~~~~~~~~*~~~~~~~~~~==========~~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~o~~~~~~~~~~~~~~~~~~~~*~~~~~~>#",
            "#~~~~~*~~~~~~~~~~~~~~~~~~~~o~~~~~~~~~~~~~~~#",
            "############################################",
        ],
    ),
    LevelDefinition(
        name="Vaults",
        diamonds=18,
        time=200,
        rows=[
            "############################################",
            "#~~~~~~~~~o~~~~~~~~~~~~~~~~~~~~~~~~~o~~~~~~#",
            "#~R~~~~~ooooo~~~~~~~*~*~*~~~~~~~~~~~~~~~~~~#",
            "#~~~~~~~~*****~~~~~~~~~~~~~~~~~ooo~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~***~~~~~~~~~#",
            "#~~~=======~~~~~~~#####~~~~~~~~~~~~~~======#",
            "#~~~=     =~~~~~~~#   #~~~~~~o~~~~~~~=    %#",
            "#~~~=  %  =~~~~~~~# * #~~~~~~~~~~~~~~=     #",
            "#~~~=     =~~~~~~~#   #~~~~~*~~~~~~~~=     #",
            "#~~~=======~~~~~~~##=##~~~~~~~~~~~~~~======#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "#~~o~~o~~o~~o~~o~~~~~~~~~~~o~o~o~~~~~~~~~~~#",
            "#~~*~~*~~*~~*~~*~~~~~~~~~~~*~*~*~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "#=====~~~~~~~~~~~~===============~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~o~~~~~#",
            "#~~~~~o~~~~~~~*~~~~~~~~~~o~~~~~~~~~~*~~~~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "#~~*~~~~~~~o~~~~~~~~~~~~~~~~~*~~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "#>~~~~~~~~~~~~~~~o~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "############################################",
        ],
    ),
    LevelDefinition(
        name="Avalanche",
        diamonds=20,
        time=250,
        rows=[
            "############################################",
            "#R~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~~~~oooooooooooooooooooooooo~~~~~~~~~~~#",
            "#~~~~~~~************************~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~==============~~~~~~~==============~~~#",
            "#~~~~=            =~~~~~~~=            =~~~#",
            "#~~~~=  @      @  =~~~~~~~=  %      %  =~~~#",
            "#~~~~=            =~~~~~~~=            =~~~#",
            "#~~~~==============~~~~~~~==============~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~~~~~o~~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~o~~~~~*~~~~~~~~~*~~~~~~~~~o~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~~~~~~~~~~~~~~~*~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~######~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~#    #~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~# %  #~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~#    #~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~~~~~~~~~~~~######~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~o~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~#",
            "#~~~~*~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~>#",
            "############################################",
        ],
    ),
]

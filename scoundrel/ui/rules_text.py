RULES = """\
SCOUNDREL

You are crawling through a dungeon built from a 44-card deck: all Spades and
Clubs, plus Diamonds and Hearts 2-10 (no red face cards, no jokers).

  Spades / Clubs  monsters  damage equals rank (J=11, Q=12, K=13, A=14)
  Diamonds        weapons   reduce monster damage by their rank
  Hearts          potions   restore health, up to 20

You start with 20 health. Each turn the room is filled to 4 cards. Resolve
cards one at a time until only one is left; it stays for the next room.

  f N   fight monster N bare handed: take its full strength as damage
  a N   attack monster N with your weapon: take (monster - weapon), min 0
  e N   equip weapon N, discarding the one you hold
  h N   drink potion N; only the first potion each turn heals
  s     skip the room: all 4 cards go to the bottom of the deck.
        Only before resolving any card, and never two rooms in a row.
  r     show these rules
  q     quit

Weapons dull: once a weapon has slain a monster it can only be used on
monsters strictly weaker than the last one it killed. Equipping a new weapon
starts fresh.

The game ends when your health hits 0 (score: minus the strength of the
monsters still in the deck) or when the deck runs out (score: your health).
When the final room is dealt with four cards or fewer left, you win by
default once you resolve a card.
"""

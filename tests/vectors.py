"""
Known-answer vectors shared by the tests
"""

# --- "all all ... all" root, default layout --- #
ALL_MNEMONIC = "all all all all all all all all all all all all"
ALL_ROOT_XPRV = \
    "xprv9s21ZrQH143K2rbkN6QpF6ZB3QQcyJA6aYbagMp6i8y831VVvpfcWNWqg5DM6GxSn66UDQUrgRgQEsLPZJC3APkPsQjxB7ndNMgj5R5HLmo"
ALL_MNEMONICS = {
    12: "dragon great exhaust dice owner element tank canal cliff brand vibrant twelve",
    18: "affair dolphin door couple swarm fiscal below thunder crane box follow suffer minute jungle pipe digital "
        "december cereal",
    24: "cook tower daring garage salt transfer pipe expand design sadness noise hello coffee mechanic barely sorry "
        "midnight jungle around dinner maze survey pretty review",
}

# --- Published BIP85 vectors, full scalar layout --- #
BIP85_MASTER_XPRV = \
    "xprv9s21ZrQH143K2LBWUUQRFXhucrQqBpKdRRxNVq2zBqsx8HVqFk2uYo8kmbaLLHRdqtQpUm98uKfu3vca1LqdGhUtyoFnCNkfmXRyPXLjbKb"
BIP85_MNEMONICS = {
    12: "girl mad pet galaxy egg matter matrix prison refuse sense ordinary nose",
    18: "near account window bike charge season chef number sketch tomorrow excuse sniff circle vital hockey outdoor "
        "supply token",
    24: "puppy ocean match cereal symbol another shed magic wrap hammer bulb intact gadget divorce twin tonight "
        "reason outdoor destroy simple truth cigar social volcano",
}
BIP85_XPRV = \
    "xprv9s21ZrQH143K2srSbCSg4m4kLvPMzcWydgmKEnMmoZUurYuBuYG46c6P71UGXMzmriLzCCBvKQWBUv3vPB3m1SATMhp3uEjXHJ42jFg7myX"


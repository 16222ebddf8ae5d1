"""
Trade Condition Codes

Exchange-assigned condition codes carried on every option print. The codes are
a closed set; everything the rest of the package needs to know about a code is
kept in a data table rather than in branching logic.
"""

from enum import IntEnum, IntFlag


class ConditionFlag(IntFlag):
    """Predicate bits attached to a condition code."""

    NONE = 0
    MULTI_LEG = 1
    WITH_STOCK = 2
    SWEEP = 4
    CANCEL = 8


class ConditionID(IntEnum):
    """Numeric trade condition code as reported by the exchange feed."""

    REGULAR = 0
    FORM_T = 1
    OUT_OF_SEQ = 2
    AVG_PRC = 3
    OPEN_REPORT_LATE = 5
    OPEN_REPORT_OUT_OF_SEQ = 6
    OPEN_REPORT_IN_SEQ = 7
    PRIOR_REFERENCE_PRICE = 8
    NEXT_DAY_SALE = 9
    BUNCHED = 10
    CASH_SALE = 11
    SELLER = 12
    SOLD_LAST = 13
    RULE_127 = 14
    BUNCHED_SOLD = 15
    AUTO_EXECUTION = 18
    REOPEN = 21
    ACQUISITION = 22
    RULE_155 = 29
    DISTRIBUTION = 30
    SPLIT = 31
    ADJ_TERMS = 34
    SPREAD = 35
    STRADDLE = 36
    BUY_WRITE = 37
    COMBO = 38
    STPD = 39
    CANC = 40
    CANC_LAST = 41
    CANC_OPEN = 42
    CANC_ONLY = 43
    CANC_STPD = 44
    MATCH_CROSS = 45
    INTERNAL_CROSS = 54
    STOPPED_REGULAR = 55
    STOPPED_SOLD_LAST = 56
    STOPPED_OUT_OF_SEQ = 57
    OPEN_REPORT = 62
    MARKET_ON_CLOSE = 63
    OUT_OF_SEQ_PRE_MKT = 65
    MC_OFFICIAL_OPEN = 66
    YELLOW_FLAG = 79
    PRE_OPENING = 89
    INTERMARKET_SWEEP = 95
    DERIVATIVE = 96
    REOPENING = 97
    CLOSING = 98
    ODD_LOT_TRADE = 99
    PRICE_VARIATION = 104
    CONTINGENT = 105
    STOPPED_IM = 106
    BENCHMARK = 107
    TRADE_THROUGH_EXEMPT = 108
    TRADE_CORRECTION = 111
    BLOCK = 112
    ECRP = 113
    SING_LEG_AUCT_NON_ISO = 114
    SING_LEG_AUCT_ISO = 115
    SING_LEG_CROSS_NON_ISO = 116
    SING_LEG_CROSS_ISO = 117
    SING_LEG_FLR = 118
    MULT_LEG_AUTO_EX = 119
    MULT_LEG_AUCT = 120
    MULT_LEG_CROSS = 121
    MULT_LEG_FLR = 122
    MULT_LEG_AUTO_SING_LEG = 123
    STK_OPT_AUCT = 124
    MULT_LEG_AUCT_SING_LEG = 125
    MULT_LEG_FLR_SING_LEG = 126
    STK_OPT_AUTO_EX = 127
    STK_OPT_CROSS = 128
    STK_OPT_FLR = 129
    STK_OPT_AUTO_EX_SING_LEG = 130
    STK_OPT_AUCT_SING_LEG = 131
    STK_OPT_FLR_SING_LEG = 132
    MULT_LEG_FLR_PROP_PROD = 133
    CORR_CONS_CLOSE = 134
    QUAL_CONT_TRADE = 135
    MULTI_COMPRESS_PROP = 136
    EXTENDED_HOURS = 137

    @property
    def label(self) -> str:
        return CONDITION_TABLE.get(self, (self.name.replace("_", " ").title(), ConditionFlag.NONE))[0]

    @property
    def flags(self) -> ConditionFlag:
        return CONDITION_TABLE.get(self, ("", ConditionFlag.NONE))[1]

    def is_multi_leg(self) -> bool:
        return bool(self.flags & ConditionFlag.MULTI_LEG)

    def includes_stock_trade(self) -> bool:
        return bool(self.flags & ConditionFlag.WITH_STOCK)

    def is_sweep(self) -> bool:
        return bool(self.flags & ConditionFlag.SWEEP)

    def is_cancel(self) -> bool:
        return bool(self.flags & ConditionFlag.CANCEL)


_ML = ConditionFlag.MULTI_LEG
_STK = ConditionFlag.MULTI_LEG | ConditionFlag.WITH_STOCK
_SWP = ConditionFlag.SWEEP
_CXL = ConditionFlag.CANCEL

# Codes missing here fall back to a title-cased name and no flags.
# STK_OPT_AUTO_EX (127) is multi-leg but the feed does not report an implied
# stock print for it, so it carries no WITH_STOCK bit.
CONDITION_TABLE: dict[ConditionID, tuple[str, ConditionFlag]] = {
    ConditionID.FORM_T: ("Form T", ConditionFlag.NONE),
    ConditionID.OUT_OF_SEQ: ("Out Of Sequence", ConditionFlag.NONE),
    ConditionID.SOLD_LAST: ("Sold Last", ConditionFlag.NONE),
    ConditionID.CANC: ("Cancel", _CXL),
    ConditionID.CANC_LAST: ("Cancel Last", _CXL),
    ConditionID.CANC_OPEN: ("Cancel Open", _CXL),
    ConditionID.CANC_ONLY: ("Cancel Only", _CXL),
    ConditionID.CANC_STPD: ("Cancel Stopped", _CXL),
    ConditionID.AUTO_EXECUTION: ("Single Leg Automated Execution", ConditionFlag.NONE),
    ConditionID.INTERMARKET_SWEEP: ("Inter Market Sweep", _SWP),
    ConditionID.SING_LEG_AUCT_NON_ISO: ("Single Leg Auction non Sweep Order", ConditionFlag.NONE),
    ConditionID.SING_LEG_AUCT_ISO: ("Single Leg Auction Sweep Order", _SWP),
    ConditionID.SING_LEG_CROSS_NON_ISO: ("Single Leg Cross non Sweep Order", ConditionFlag.NONE),
    ConditionID.SING_LEG_CROSS_ISO: ("Single Leg Cross Sweep Order", _SWP),
    ConditionID.SING_LEG_FLR: ("Single Leg Floor Trade", ConditionFlag.NONE),
    ConditionID.MULT_LEG_AUTO_EX: ("Multi Leg Algorithmic Execution", _ML),
    ConditionID.MULT_LEG_AUCT: ("Multi Leg Auction", _ML),
    ConditionID.MULT_LEG_CROSS: ("Multi Leg Cross", _ML),
    ConditionID.MULT_LEG_FLR: ("Multi Leg Floor Trade", _ML),
    ConditionID.MULT_LEG_AUTO_SING_LEG: ("Multi Algorithmic vs Single Legs", _ML),
    ConditionID.STK_OPT_AUCT: ("Multi Leg with Stock Auction", _STK),
    ConditionID.MULT_LEG_AUCT_SING_LEG: ("Multi Leg Auction vs Single Legs", _ML),
    ConditionID.MULT_LEG_FLR_SING_LEG: ("Multi Leg Floor Trade vs Single Legs", _ML),
    ConditionID.STK_OPT_AUTO_EX: ("Multi Leg with Stock Algorithmic Execution", _ML),
    ConditionID.STK_OPT_CROSS: ("Multi Leg with Stock Cross", _STK),
    ConditionID.STK_OPT_FLR: ("Multi Leg with Stock Floor Trade", _STK),
    ConditionID.STK_OPT_AUTO_EX_SING_LEG: (
        "Multi Leg with Stock Algorithmic Execution vs Single Legs",
        _STK,
    ),
    ConditionID.STK_OPT_AUCT_SING_LEG: ("Multi Leg with Stock Auction vs Single Legs", _STK),
    ConditionID.STK_OPT_FLR_SING_LEG: ("Multi Leg with Stock Floor Trade vs Single Legs", _STK),
    ConditionID.MULT_LEG_FLR_PROP_PROD: ("Multi Leg Floor Trade of Proprietary Products", _ML),
}

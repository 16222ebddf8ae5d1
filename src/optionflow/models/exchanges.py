"""
Exchange Identifiers
"""

from enum import IntEnum


class Exchange(IntEnum):
    """Reporting venue for a trade print."""

    NASDAQ = 1
    NASDAQ_ADF = 2
    NYSE = 3
    AMEX = 4
    CBOE = 5
    ISE = 6
    NYSE_ARCA = 7
    NYSE_NATIONAL = 8
    PHLX = 9
    BOSTON = 11
    NASDAQ_BULLETIN_BOARD = 14
    NASDAQ_OTC_PINK = 15
    CHICAGO_STOCK = 17
    CME = 20
    ISE_MERCURY = 22
    DOW_JONES_INDICES = 30
    ISE_GEMINI = 31
    C2 = 42
    MIAX = 43
    NASDAQ_BX_OPTIONS = 47
    CBOE_FUTURES = 54
    NSX_TRF = 57
    NYSE_TRF = 59
    BATS = 60
    BATS_EQUITY = 63
    EDGA = 64
    EDGX = 65
    IEX = 68
    MIAX_PEARL = 69
    MIAX_EMERALD = 71
    CHIX_EUROPE = 115
    LTSE = 117
    FINRA_ADF = 118
    FINRA_NASDAQ_TRF_CHICAGO = 119
    MEMX = 120

    @property
    def label(self) -> str:
        return EXCHANGE_NAMES[self]


EXCHANGE_NAMES: dict[Exchange, str] = {
    Exchange.NASDAQ: "NASDAQ",
    Exchange.NASDAQ_ADF: "NASDAQ ADF",
    Exchange.NYSE: "NYSE",
    Exchange.AMEX: "American Stock Exchange",
    Exchange.CBOE: "CBOE",
    Exchange.ISE: "International Securities Exchange",
    Exchange.NYSE_ARCA: "NYSE ARCA",
    Exchange.NYSE_NATIONAL: "NYSE National",
    Exchange.PHLX: "Philadelphia Stock Exchange",
    Exchange.BOSTON: "Boston Stock Exchange",
    Exchange.NASDAQ_BULLETIN_BOARD: "NASDAQ Bulletin Board",
    Exchange.NASDAQ_OTC_PINK: "NASDAQ OTC Pink Sheets",
    Exchange.CHICAGO_STOCK: "Chicago Stock Exchange",
    Exchange.CME: "CME",
    Exchange.ISE_MERCURY: "ISE Mercury",
    Exchange.DOW_JONES_INDICES: "Dow Jones Indices",
    Exchange.ISE_GEMINI: "ISE Gemini",
    Exchange.C2: "C2",
    Exchange.MIAX: "MIAX Options Exchange",
    Exchange.NASDAQ_BX_OPTIONS: "NASDAQ OMX BX Options",
    Exchange.CBOE_FUTURES: "CBOE Futures",
    Exchange.NSX_TRF: "NSX Trade Reporting",
    Exchange.NYSE_TRF: "NYSE Trade Reporting",
    Exchange.BATS: "BATS Option & Equity",
    Exchange.BATS_EQUITY: "BATS Equity",
    Exchange.EDGA: "Direct Edge A",
    Exchange.EDGX: "Direct Edge X",
    Exchange.IEX: "IEX Stock Exchange",
    Exchange.MIAX_PEARL: "MIAX Pearl",
    Exchange.MIAX_EMERALD: "MIAX Emerald Options",
    Exchange.CHIX_EUROPE: "CHI-X Europe",
    Exchange.LTSE: "Long Term Stock Exchange",
    Exchange.FINRA_ADF: "FINRA ADF",
    Exchange.FINRA_NASDAQ_TRF_CHICAGO: "FINRA NASDAQ TRF Chicago",
    Exchange.MEMX: "Members Exchange",
}

from .tenure import LOYALTY_CUTOFFS, LoyaltyBand, LoyaltyCutoff, loyalty_band_for_year

__all__ = ["LOYALTY_CUTOFFS", "LoyaltyBand", "LoyaltyCutoff", "loyalty_band_for_year"]

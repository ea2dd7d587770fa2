from lyocalc.risk.terpene_risk import TerpeneRiskResult, evaluate_terpene_risk, first_risk_times

__all__ = ["TerpeneRiskResult", "evaluate_terpene_risk", "first_risk_times"]

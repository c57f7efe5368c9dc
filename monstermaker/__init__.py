"""Monster Maker: 타입 상성 그래프 + 종/몬스터 데이터 모델"""

__version__ = "0.1.0"

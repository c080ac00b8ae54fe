"""
オーケストレーション層

ストアと永続化を組み合わせたサービスを提供します。
"""

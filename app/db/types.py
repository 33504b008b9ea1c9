"""
Column types shared by the hris models
"""
from sqlalchemy import BigInteger, Integer

# sqlite only autoincrements INTEGER PRIMARY KEY
BigIntId = BigInteger().with_variant(Integer(), "sqlite")

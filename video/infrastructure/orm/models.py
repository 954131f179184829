from sqlalchemy import Column, String, Text, BigInteger, DateTime

from config.database.session import Base


class VideoORM(Base):
    __tablename__ = "videos"

    id = Column(String(100), primary_key=True)
    channel = Column(String(100))
    title = Column(String(500))
    description = Column(Text)
    published_at = Column(DateTime(timezone=True))
    views = Column(BigInteger)
    likes = Column(BigInteger)
    dislikes = Column(BigInteger)
    comment_count = Column(BigInteger)
    # 한국어 주석: topics / tags / hash_tags 는 ';' 로 이어 붙인 문자열로 저장된다.
    topics = Column(Text)
    tags = Column(Text)
    hash_tags = Column(Text)

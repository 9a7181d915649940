from urlstore.dao.base.url_record_base_dao import URLRecordBaseDAO


__all__ = ['URLRecordBaseDAO']

"""Guild topic feeds and their rich content elements."""
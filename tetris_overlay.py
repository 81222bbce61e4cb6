import pygame
from tetris_config import CONFIG


class Overlay:
    """Settings panel; edits CONFIG live and reports which key changed."""
    def __init__(self):
        self.active=False
        self.items=[
            ("OPPONENT","Opponent",("ai","p2"),None,None),
            ("INFINITE_MODE","Infinite mode",False,True,None),
            ("AI_DECISION_DELAY_MS","AI delay (ms)",50,1000,25),
            ("CELL_SIZE","Cell size",16,40,2),
        ]
        self.index=0

    def toggle(self): self.active=not self.active

    def handle(self,e):
        if e.key in (pygame.K_ESCAPE,pygame.K_F1): self.toggle(); return None
        if e.key==pygame.K_UP: self.index=(self.index-1)%len(self.items); return None
        if e.key==pygame.K_DOWN: self.index=(self.index+1)%len(self.items); return None
        key,label,lo,hi,step=self.items[self.index]
        val=CONFIG[key]
        if isinstance(lo,tuple):
            if e.key not in (pygame.K_RETURN,pygame.K_LEFT,pygame.K_RIGHT): return None
            d=-1 if e.key==pygame.K_LEFT else 1
            CONFIG[key]=lo[(lo.index(val)+d)%len(lo)]
        elif isinstance(lo,bool):
            if e.key not in (pygame.K_RETURN,pygame.K_LEFT,pygame.K_RIGHT): return None
            CONFIG[key]=not val
        else:
            if e.key==pygame.K_LEFT: CONFIG[key]=max(lo,val-step)
            elif e.key==pygame.K_RIGHT: CONFIG[key]=min(hi,val+step)
            else: return None
        return key if CONFIG[key]!=val else None

    def draw(self,screen,font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,h-80),pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,(40,40))
        screen.blit(font.render("SETTINGS (F1/Esc to close)",True,(230,240,255)),(60,56))
        y=80
        for i,(key,label,lo,hi,step) in enumerate(self.items):
            col=(255,255,255) if i==self.index else (200,210,235)
            v=CONFIG[key]
            txt=f"{label}: {v}"
            screen.blit(font.render(txt,True,col),(60,40+y)); y+=30
